"""Unit tests for application use cases; the event publisher is mocked."""
from unittest.mock import AsyncMock, MagicMock

import pytest

from nft_marketplace.application.context import MarketplaceContext
from nft_marketplace.application.use_cases.approve_transfers import (
    ApproveToken,
    ApproveTokenInput,
    SetApprovalForAll,
    SetApprovalForAllInput,
)
from nft_marketplace.application.use_cases.deploy_collection import (
    DeployCollection,
    DeployCollectionInput,
)
from nft_marketplace.application.use_cases.fund_account import FundAccount, FundAccountInput
from nft_marketplace.application.use_cases.get_item import GetItem
from nft_marketplace.application.use_cases.make_item import MakeItem, MakeItemInput
from nft_marketplace.application.use_cases.mint_token import MintToken, MintTokenInput
from nft_marketplace.application.use_cases.purchase_item import PurchaseItem, PurchaseItemInput
from nft_marketplace.bootstrap import build_context
from nft_marketplace.config import Settings
from nft_marketplace.domain.errors import (
    AlreadySoldError,
    CollectionNotFoundError,
    InvalidPriceError,
    ListingNotFoundError,
)
from nft_marketplace.domain.events.domain_events import (
    ApprovalEvent,
    ApprovalForAllEvent,
    BoughtEvent,
    OfferedEvent,
    TransferEvent,
)
from nft_marketplace.domain.value_objects.address import new_address
from nft_marketplace.domain.value_objects.ether import to_wei

DEPLOYER = "0x" + "d" * 40


def _make_context(fee_percent: int = 1) -> MarketplaceContext:
    return build_context(Settings(deployer_address=DEPLOYER, fee_percent=fee_percent))


def _make_publisher() -> MagicMock:
    pub = MagicMock()
    pub.publish_many = AsyncMock()
    return pub


def _published(publisher: MagicMock) -> list:  # type: ignore[type-arg]
    return [event for call in publisher.publish_many.await_args_list for event in call.args[0]]


def _default_collection(context: MarketplaceContext) -> str:
    return context.collections.list_all()[0].address


async def _mint_and_approve(context: MarketplaceContext, owner: str) -> int:
    collection = _default_collection(context)
    result = await MintToken(context, _make_publisher()).execute(
        MintTokenInput(collection=collection, token_uri="Sample URI", caller=owner)
    )
    await SetApprovalForAll(context, _make_publisher()).execute(
        SetApprovalForAllInput(
            collection=collection,
            operator=context.marketplace.address,
            approved=True,
            caller=owner,
        )
    )
    return result.token_id


class TestBootstrap:
    def test_fee_account_defaults_to_deployer(self) -> None:
        context = _make_context()
        assert context.deployer == DEPLOYER
        assert context.marketplace.fee_account == DEPLOYER
        assert context.marketplace.fee_percent == 1

    def test_explicit_fee_account(self) -> None:
        fee_account = new_address()
        context = build_context(Settings(deployer_address=DEPLOYER, fee_account=fee_account))
        assert context.marketplace.fee_account == fee_account

    def test_default_collection_deployed(self) -> None:
        collections = _make_context().collections.list_all()
        assert [(c.name, c.symbol) for c in collections] == [("Ultras", "ULTRA")]


class TestDeployCollection:
    def test_registers_collection(self) -> None:
        context = _make_context()
        result = DeployCollection(context).execute(DeployCollectionInput(name="Other", symbol="OTH"))
        assert context.get_collection(result.address).symbol == "OTH"

    def test_lookup_is_case_insensitive(self) -> None:
        context = _make_context()
        address = _default_collection(context)
        assert context.get_collection(address.upper().replace("0X", "0x")).address == address


class TestMintToken:
    @pytest.mark.asyncio
    async def test_mints_and_publishes_transfer(self) -> None:
        context = _make_context()
        publisher = _make_publisher()
        owner = new_address()

        result = await MintToken(context, publisher).execute(
            MintTokenInput(collection=_default_collection(context), token_uri="ipfs://1", caller=owner)
        )

        assert result.token_id == 1
        assert result.owner == owner
        events = _published(publisher)
        assert len(events) == 1
        assert isinstance(events[0], TransferEvent)

    @pytest.mark.asyncio
    async def test_unknown_collection(self) -> None:
        context = _make_context()
        with pytest.raises(CollectionNotFoundError):
            await MintToken(context, _make_publisher()).execute(
                MintTokenInput(collection=new_address(), token_uri="x", caller=new_address())
            )


class TestApprovals:
    @pytest.mark.asyncio
    async def test_set_approval_for_all_publishes_event(self) -> None:
        context = _make_context()
        publisher = _make_publisher()
        owner = new_address()
        await SetApprovalForAll(context, publisher).execute(
            SetApprovalForAllInput(
                collection=_default_collection(context),
                operator=context.marketplace.address,
                approved=True,
                caller=owner,
            )
        )
        collection = context.get_collection(_default_collection(context))
        assert collection.is_approved_for_all(owner, context.marketplace.address)
        assert isinstance(_published(publisher)[0], ApprovalForAllEvent)

    @pytest.mark.asyncio
    async def test_approve_token_publishes_event(self) -> None:
        context = _make_context()
        owner = new_address()
        token_id = await _mint_and_approve(context, owner)
        publisher = _make_publisher()
        spender = new_address()

        await ApproveToken(context, publisher).execute(
            ApproveTokenInput(
                collection=_default_collection(context), token_id=token_id, to=spender, caller=owner
            )
        )

        assert context.get_collection(_default_collection(context)).get_approved(token_id) == spender
        assert isinstance(_published(publisher)[0], ApprovalEvent)


class TestMakeItem:
    @pytest.mark.asyncio
    async def test_lists_item_and_publishes_transfer_then_offered(self) -> None:
        context = _make_context()
        seller = new_address()
        token_id = await _mint_and_approve(context, seller)
        publisher = _make_publisher()

        result = await MakeItem(context, publisher).execute(
            MakeItemInput(
                nft=_default_collection(context), token_id=token_id, price=to_wei(1), caller=seller
            )
        )

        assert result.listing.item_id == 1
        assert result.listing.seller == seller
        publisher.publish_many.assert_awaited_once()
        events = _published(publisher)
        assert [type(e) for e in events] == [TransferEvent, OfferedEvent]

    @pytest.mark.asyncio
    async def test_invalid_price_publishes_nothing(self) -> None:
        context = _make_context()
        seller = new_address()
        token_id = await _mint_and_approve(context, seller)
        publisher = _make_publisher()

        with pytest.raises(InvalidPriceError):
            await MakeItem(context, publisher).execute(
                MakeItemInput(nft=_default_collection(context), token_id=token_id, price=0, caller=seller)
            )

        publisher.publish_many.assert_not_awaited()
        assert context.marketplace.item_count == 0


class TestPurchaseItem:
    async def _listed(self, price: int = to_wei(2)) -> tuple[MarketplaceContext, str, str]:
        context = _make_context()
        seller, buyer = new_address(), new_address()
        context.balances.credit(buyer, to_wei(100))
        token_id = await _mint_and_approve(context, seller)
        await MakeItem(context, _make_publisher()).execute(
            MakeItemInput(nft=_default_collection(context), token_id=token_id, price=price, caller=seller)
        )
        return context, seller, buyer

    @pytest.mark.asyncio
    async def test_purchases_and_publishes_transfer_then_bought(self) -> None:
        context, seller, buyer = await self._listed()
        publisher = _make_publisher()

        result = await PurchaseItem(context, publisher).execute(
            PurchaseItemInput(item_id=1, value=to_wei("2.02"), caller=buyer)
        )

        assert result.listing.sold is True
        assert result.total_price == to_wei("2.02")
        assert result.fee == to_wei("0.02")
        assert context.balances.balance_of(seller) == to_wei(2)
        assert context.balances.balance_of(DEPLOYER) == to_wei("0.02")
        events = _published(publisher)
        assert [type(e) for e in events] == [TransferEvent, BoughtEvent]

    @pytest.mark.asyncio
    async def test_second_purchase_raises_already_sold(self) -> None:
        context, _, buyer = await self._listed()
        use_case = PurchaseItem(context, _make_publisher())
        await use_case.execute(PurchaseItemInput(item_id=1, value=to_wei("2.02"), caller=buyer))

        publisher = _make_publisher()
        with pytest.raises(AlreadySoldError):
            await PurchaseItem(context, publisher).execute(
                PurchaseItemInput(item_id=1, value=to_wei("2.02"), caller=buyer)
            )
        publisher.publish_many.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_item(self) -> None:
        context, _, buyer = await self._listed()
        with pytest.raises(ListingNotFoundError):
            await PurchaseItem(context, _make_publisher()).execute(
                PurchaseItemInput(item_id=0, value=to_wei(3), caller=buyer)
            )


class TestGetItem:
    def test_unknown_item_raises(self) -> None:
        with pytest.raises(ListingNotFoundError):
            GetItem(_make_context()).execute(1)

    @pytest.mark.asyncio
    async def test_returns_listing_with_total_price(self) -> None:
        context = _make_context()
        seller = new_address()
        token_id = await _mint_and_approve(context, seller)
        await MakeItem(context, _make_publisher()).execute(
            MakeItemInput(nft=_default_collection(context), token_id=token_id, price=200, caller=seller)
        )

        result = GetItem(context).execute(1)
        assert result.listing.price == 200
        assert result.total_price == 202
        assert [r.listing.item_id for r in GetItem(context).list_all()] == [1]


class TestFundAccount:
    def test_credits_balance(self) -> None:
        context = _make_context()
        address = new_address()
        FundAccount(context).execute(FundAccountInput(address=address, amount=5))
        result = FundAccount(context).execute(FundAccountInput(address=address, amount=7))
        assert result.balance == 12
