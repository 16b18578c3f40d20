"""Unit tests for the OrderFulfillmentService domain service."""

import pytest

from ledger.domain.exceptions import (
    AlreadyExistsError,
    InsufficientStockError,
    ValidationError,
)
from ledger.domain.model.value_objects import CampaignStatus
from ledger.domain.service.order_fulfillment_service import OrderFulfillmentService
from tests.fakes import (
    FakeCampaignRepository,
    FakeOrderRepository,
    make_campaign,
    make_product,
)


def _setup(stock=100, price=100.0, campaign_kwargs=None, order_repo=None):
    product = make_product(price=price, stock=stock)
    campaigns = []
    if campaign_kwargs is not None:
        campaigns.append(make_campaign(product, **campaign_kwargs))
    order_repo = order_repo or FakeOrderRepository()
    svc = OrderFulfillmentService(order_repo, FakeCampaignRepository(campaigns))
    return svc, product, campaigns[0] if campaigns else None, order_repo


class TestPlaceOrderWithoutCampaign:

    def test_partial_stock(self):
        svc, product, _, order_repo = _setup()
        order = svc.place_order(product, 50)

        assert product.stock.value == 50
        assert product.total_demand_count.value == 50
        assert product.price.value == 100.0
        assert order.product_code == product.code
        assert order.quantity.value == 50
        assert order_repo.list_all() == [order]

    def test_whole_stock(self):
        svc, product, _, _ = _setup()
        svc.place_order(product, 100)
        assert product.stock.value == 0

    @pytest.mark.parametrize("qty", [1, 7, 33, 99])
    def test_stock_drops_by_exact_quantity(self, qty):
        svc, product, _, _ = _setup()
        svc.place_order(product, qty)
        assert product.stock.value == 100 - qty

    def test_orders_get_distinct_ids(self):
        svc, product, _, _ = _setup()
        a = svc.place_order(product, 1)
        b = svc.place_order(product, 1)
        assert a.id != b.id


class TestPlaceOrderRejected:

    def test_insufficient_stock_leaves_product_untouched(self):
        svc, product, _, order_repo = _setup()
        with pytest.raises(InsufficientStockError, match="need 150, have 100"):
            svc.place_order(product, 150)

        assert product.stock.value == 100
        assert product.total_demand_count.value == 0
        assert order_repo.list_all() == []

    def test_insufficient_stock_leaves_campaign_untouched(self):
        svc, product, campaign, _ = _setup(
            stock=10, campaign_kwargs={"target": 5}
        )
        with pytest.raises(InsufficientStockError):
            svc.place_order(product, 11)

        assert campaign.total_sales == 0
        assert campaign.average_item_price == 0.0
        assert campaign.status == CampaignStatus.ACTIVE

    @pytest.mark.parametrize("qty", [0, -1])
    def test_invalid_quantity_rejected(self, qty):
        svc, product, _, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            svc.place_order(product, qty)
        assert product.stock.value == 100

    def test_storage_failure_aborts_before_mutation(self):
        failing = FakeOrderRepository(fail_with=AlreadyExistsError("Order exists"))
        svc, product, campaign, _ = _setup(
            campaign_kwargs={}, order_repo=failing
        )
        with pytest.raises(AlreadyExistsError, match="Order exists"):
            svc.place_order(product, 10)

        assert product.stock.value == 100
        assert product.total_demand_count.value == 0
        assert campaign.total_sales == 0


class TestPlaceOrderWithCampaign:

    def test_sales_count_towards_campaign(self):
        svc, product, campaign, _ = _setup(campaign_kwargs={})
        svc.place_order(product, 50)

        assert campaign.total_sales == 50
        assert campaign.average_item_price == 100.0
        assert campaign.status == CampaignStatus.ACTIVE
        assert product.campaign_name == campaign.name

    def test_reaching_target_ends_campaign(self):
        svc, product, campaign, _ = _setup(campaign_kwargs={"target": 100})
        svc.place_order(product, 100)

        assert campaign.total_sales == 100
        assert campaign.status == CampaignStatus.ENDED
        assert product.campaign_name is None
        assert product.stock.value == 0

    def test_overshoot_only_counts_up_to_target(self):
        svc, product, campaign, _ = _setup(campaign_kwargs={"target": 30})
        svc.place_order(product, 20)
        svc.place_order(product, 25)

        assert campaign.total_sales == 30
        assert campaign.status == CampaignStatus.ENDED
        # the whole order still leaves stock
        assert product.stock.value == 55
        assert product.total_demand_count.value == 45

    def test_ending_campaign_restores_initial_price(self):
        svc, product, campaign, _ = _setup(campaign_kwargs={"target": 10})
        product.update_price(120.0)
        svc.place_order(product, 10)

        # sale recorded at the campaign price, then the price resets
        assert campaign.average_item_price == 120.0
        assert product.price.value == 100.0

    def test_average_tracks_price_changes(self):
        svc, product, campaign, _ = _setup(campaign_kwargs={"target": 100})
        svc.place_order(product, 10)
        product.update_price(90.0)
        svc.place_order(product, 10)
        assert campaign.average_item_price == pytest.approx(95.0)

    def test_average_equals_mean_at_constant_price(self):
        svc, product, campaign, _ = _setup(campaign_kwargs={"target": 100})
        for qty in (5, 10, 15, 20):
            svc.place_order(product, qty)
        assert campaign.total_sales == 50
        assert campaign.average_item_price == pytest.approx(100.0)

    def test_total_sales_never_exceed_target(self):
        svc, product, campaign, _ = _setup(stock=100, campaign_kwargs={"target": 17})
        for _ in range(10):
            svc.place_order(product, 3)
            assert campaign.total_sales <= 17
        assert campaign.total_sales == 17

    def test_ended_campaign_is_not_touched_by_later_orders(self):
        svc, product, campaign, _ = _setup(campaign_kwargs={"target": 10})
        svc.place_order(product, 10)
        snapshot = (campaign.duration, campaign.total_sales, campaign.average_item_price)

        svc.place_order(product, 5)
        assert (campaign.duration, campaign.total_sales, campaign.average_item_price) == snapshot
        assert product.stock.value == 85
