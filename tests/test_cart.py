"""
Tests for the cart state store
"""

from decimal import Decimal

import pytest

from storefront.cart import (
    AddItem,
    CartLineItem,
    CartState,
    CartStore,
    ClearCart,
    RemoveItem,
    UpdateQuantity,
    cart_reducer,
)


def make_item(item_id=1, price=10, quantity=1, **kwargs):
    return CartLineItem(
        id=item_id,
        slug=kwargs.pop("slug", f"product-{item_id}"),
        name=kwargs.pop("name", f"Product {item_id}"),
        price=price,
        quantity=quantity,
        **kwargs,
    )


class TestCartLineItem:
    """Tests for CartLineItem dataclass."""

    def test_price_normalized_to_decimal(self):
        item = make_item(price="12.50")

        assert item.price == Decimal("12.50")
        assert isinstance(item.price, Decimal)

    def test_float_price_keeps_precision(self):
        item = make_item(price=0.1, quantity=3)

        assert item.line_total == Decimal("0.3")

    def test_to_dict_omits_missing_optionals(self):
        data = make_item().to_dict()

        assert data == {
            "id": 1,
            "slug": "product-1",
            "name": "Product 1",
            "price": Decimal("10"),
            "quantity": 1,
        }

    def test_to_dict_includes_present_optionals(self):
        data = make_item(sku="SKU-1", vendor_id=7, category_id="c-3").to_dict()

        assert data["sku"] == "SKU-1"
        assert data["vendor_id"] == 7
        assert data["category_id"] == "c-3"

    def test_from_dict(self):
        item = CartLineItem.from_dict(
            {"id": "abc", "slug": "abc", "name": "ABC", "price": "5", "quantity": "2"}
        )

        assert item.id == "abc"
        assert item.quantity == 2
        assert item.line_total == Decimal("10")


class TestCartReducer:
    """Tests for cart_reducer transitions."""

    def test_add_to_empty_cart(self):
        state = cart_reducer(CartState(), AddItem(make_item()))

        assert len(state.items) == 1
        assert state.total == Decimal("10")

    def test_add_same_id_merges_quantity(self):
        state = cart_reducer(CartState(), AddItem(make_item(quantity=2)))
        state = cart_reducer(state, AddItem(make_item(quantity=5)))

        assert len(state.items) == 1
        assert state.items[0].quantity == 7

    def test_merge_keeps_existing_fields(self):
        state = cart_reducer(CartState(), AddItem(make_item(price=10, name="Original")))
        state = cart_reducer(state, AddItem(make_item(price=99, name="Renamed")))

        assert state.items[0].name == "Original"
        assert state.items[0].price == Decimal("10")
        assert state.items[0].quantity == 2

    def test_add_preserves_insertion_order(self):
        state = CartState()
        for item_id in (3, 1, 2):
            state = cart_reducer(state, AddItem(make_item(item_id=item_id)))
        state = cart_reducer(state, AddItem(make_item(item_id=1)))

        assert [item.id for item in state.items] == [3, 1, 2]

    def test_distinct_ids_count_and_total(self):
        items = [make_item(1, "2.50", 4), make_item(2, "10", 1), make_item("x", "0.99", 3)]
        state = CartState()
        for item in items:
            state = cart_reducer(state, AddItem(item))

        assert len(state.items) == 3
        assert state.total == sum(item.price * item.quantity for item in items)
        assert state.total == Decimal("22.97")

    def test_string_and_int_ids_are_different_keys(self):
        state = cart_reducer(CartState(), AddItem(make_item(item_id=1)))
        state = cart_reducer(state, AddItem(make_item(item_id="1")))

        assert len(state.items) == 2

    def test_previous_state_is_not_mutated(self):
        first = cart_reducer(CartState(), AddItem(make_item(quantity=1)))
        second = cart_reducer(first, AddItem(make_item(quantity=1)))

        assert first.items[0].quantity == 1
        assert second.items[0].quantity == 2

    def test_remove_item(self):
        state = cart_reducer(CartState(), AddItem(make_item(1)))
        state = cart_reducer(state, AddItem(make_item(2)))
        state = cart_reducer(state, RemoveItem(1))

        assert [item.id for item in state.items] == [2]

    def test_remove_absent_id_is_noop(self):
        state = cart_reducer(CartState(), AddItem(make_item(1)))

        assert cart_reducer(state, RemoveItem(42)) is state

    def test_remove_on_empty_cart_is_noop(self):
        empty = CartState()

        assert cart_reducer(empty, RemoveItem(1)) == empty

    def test_update_quantity(self):
        state = cart_reducer(CartState(), AddItem(make_item(1, price=5)))
        state = cart_reducer(state, UpdateQuantity(1, 4))

        assert state.items[0].quantity == 4
        assert state.total == Decimal("20")

    def test_update_quantity_absent_id_is_noop(self):
        state = cart_reducer(CartState(), AddItem(make_item(1)))

        assert cart_reducer(state, UpdateQuantity(2, 9)) is state

    @pytest.mark.parametrize("quantity", [0, -2])
    def test_update_quantity_does_not_clamp(self, quantity):
        state = cart_reducer(CartState(), AddItem(make_item(1, price=10)))
        state = cart_reducer(state, AddItem(make_item(2, price=3)))
        state = cart_reducer(state, UpdateQuantity(1, quantity))

        # The line stays and still counts toward the total
        assert len(state.items) == 2
        assert state.items[0].quantity == quantity
        assert state.total == Decimal(10 * quantity + 3)

    def test_clear(self):
        state = cart_reducer(CartState(), AddItem(make_item(1)))
        state = cart_reducer(state, ClearCart())

        assert state.items == ()
        assert state.total == 0

    def test_unknown_action_returns_state(self):
        state = cart_reducer(CartState(), AddItem(make_item(1)))

        assert cart_reducer(state, object()) is state


class TestCartStore:
    """Tests for CartStore."""

    def test_new_store_is_empty(self):
        store = CartStore()

        assert store.is_empty
        assert store.items == []
        assert store.total == 0

    def test_add_twice_example(self):
        store = CartStore()
        store.add_item(make_item(1, price=10, quantity=1))
        store.add_item(make_item(1, price=10, quantity=2))

        assert len(store.items) == 1
        assert store.items[0].quantity == 3
        assert store.total == Decimal("30.00")

    def test_item_count_sums_quantities(self):
        store = CartStore()
        store.add_item(make_item(1, quantity=2))
        store.add_item(make_item(2, quantity=3))

        assert store.item_count == 5

    def test_remove_last_item_empties_cart(self):
        store = CartStore()
        store.add_item(make_item(1))
        store.remove_item(1)

        assert store.is_empty

    def test_set_quantity_zero_keeps_cart_populated(self):
        store = CartStore()
        store.add_item(make_item(1))
        store.update_quantity(1, 0)

        assert not store.is_empty
        assert store.total == 0

    def test_clear_always_resets(self):
        store = CartStore()
        for item_id in range(5):
            store.add_item(make_item(item_id, price=3, quantity=item_id + 1))
        store.clear_cart()

        assert store.items == []
        assert store.total == 0

    def test_items_returns_copy(self):
        store = CartStore()
        store.add_item(make_item(1))
        store.items.clear()

        assert len(store.items) == 1

    def test_dispatch_uses_injected_reducer(self):
        calls = []

        def recording_reducer(state, action):
            calls.append(action)
            return cart_reducer(state, action)

        store = CartStore(reducer=recording_reducer)
        store.add_item(make_item(1))
        store.clear_cart()

        assert [type(action) for action in calls] == [AddItem, ClearCart]
