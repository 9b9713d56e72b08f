"""Tests for the cart ledger."""

from concurrent.futures import ThreadPoolExecutor

import pytest
from sqlalchemy import event
from sqlalchemy.exc import IntegrityError

from storefront.core.errors import NotFoundError, ValidationError
from storefront.db.models.cart import CartItem
from storefront.db.session import SessionLocal
from storefront.services.cart_service import cart_service, parse_positive_id


class TestParsePositiveId:

    @pytest.mark.parametrize("value,expected", [(5, 5), ("5", 5), (" 12 ", 12), (3.0, 3), (2 ** 63 - 1, 2 ** 63 - 1)])
    def test_accepts(self, value, expected):
        assert parse_positive_id(value, "product ID") == expected

    @pytest.mark.parametrize("value", [None, "", "abc", "5abc", "-1", 0, -4, 2.5, True, [], {}, 2 ** 63, 10 ** 20, "9" * 25, 1e20, "\u0665", "\uff15"])
    def test_rejects(self, value):
        with pytest.raises(ValidationError, match="Invalid product ID"):
            parse_positive_id(value, "product ID")


class TestAddItem:

    def test_first_add_inserts_quantity_one(self, db, alice_id):
        item = cart_service.add_item(db, alice_id, 5)

        assert item.user_id == alice_id
        assert item.product_id == 5
        assert item.quantity == 1

    def test_repeat_add_increments_same_row(self, db, alice_id):
        first = cart_service.add_item(db, alice_id, 5)
        second = cart_service.add_item(db, alice_id, "5")

        assert second.id == first.id
        assert second.quantity == 2
        assert db.query(CartItem).count() == 1

    def test_users_get_separate_rows(self, db, alice_id, bob_id):
        a = cart_service.add_item(db, alice_id, 5)
        b = cart_service.add_item(db, bob_id, 5)

        assert a.id != b.id
        assert cart_service.count(db, alice_id) == 1
        assert cart_service.count(db, bob_id) == 1

    def test_invalid_product_id_writes_nothing(self, db, alice_id):
        with pytest.raises(ValidationError):
            cart_service.add_item(db, alice_id, "abc")
        assert db.query(CartItem).count() == 0

    def test_concurrent_adds_for_same_pair(self, alice_id):
        n = 12

        def add(_):
            session = SessionLocal()
            try:
                return cart_service.add_item(session, alice_id, 5).id
            finally:
                session.close()

        with ThreadPoolExecutor(max_workers=6) as pool:
            ids = list(pool.map(add, range(n)))

        check = SessionLocal()
        try:
            rows = check.query(CartItem).filter(CartItem.user_id == alice_id, CartItem.product_id == 5).all()
            assert len(set(ids)) == 1
            assert len(rows) == 1
            assert rows[0].quantity == n
            assert cart_service.count(check, alice_id) == n
        finally:
            check.close()

    def test_result_comes_from_the_upsert_not_a_reload(self, db, alice_id):
        """A clear landing right after the commit does not break the add."""
        cart_service.add_item(db, alice_id, 5)

        def clear_from_another_session(session):
            other = SessionLocal()
            try:
                cart_service.clear_all(other, alice_id)
            finally:
                other.close()

        event.listen(db, "after_commit", clear_from_another_session)
        try:
            item = cart_service.add_item(db, alice_id, 5)
        finally:
            event.remove(db, "after_commit", clear_from_another_session)

        assert item.product_id == 5
        assert item.quantity == 2
        assert cart_service.count(db, alice_id) == 0

    def test_storage_rejects_duplicate_pair(self, db, alice_id):
        db.add(CartItem(user_id=alice_id, product_id=5, quantity=1))
        db.commit()
        db.add(CartItem(user_id=alice_id, product_id=5, quantity=1))
        with pytest.raises(IntegrityError):
            db.commit()
        db.rollback()


class TestCountAndList:

    def test_count_sums_quantities(self, db, alice_id):
        for product_id in (1, 1, 2, 5):
            cart_service.add_item(db, alice_id, product_id)

        assert cart_service.count(db, alice_id) == 4

    def test_count_empty_and_anonymous(self, db, alice_id):
        assert cart_service.count(db, alice_id) == 0
        assert cart_service.count(db, None) == 0

    def test_list_joins_products_in_insertion_order(self, db, alice_id, products):
        cart_service.add_item(db, alice_id, 5)
        cart_service.add_item(db, alice_id, 1)
        cart_service.add_item(db, alice_id, 5)

        items = cart_service.list_items(db, alice_id)

        assert [(i["title"], i["quantity"]) for i in items] == [("Abbey Road", 2), ("Kind of Blue", 1)]
        assert set(items[0]) == {"cartItemId", "quantity", "title", "artist", "price"}
        assert items[0]["artist"] == "The Beatles"
        assert items[0]["price"] == 35.0

    def test_list_empty(self, db, alice_id):
        assert cart_service.list_items(db, alice_id) == []

    def test_list_only_own_rows(self, db, alice_id, bob_id, products):
        cart_service.add_item(db, bob_id, 3)

        assert cart_service.list_items(db, alice_id) == []


class TestRemoveAndClear:

    def test_remove_item(self, db, alice_id):
        item = cart_service.add_item(db, alice_id, 5)

        cart_service.remove_item(db, alice_id, str(item.id))

        assert cart_service.count(db, alice_id) == 0

    def test_remove_foreign_item_is_not_found(self, db, alice_id, bob_id):
        bobs = cart_service.add_item(db, bob_id, 5)

        with pytest.raises(NotFoundError) as foreign:
            cart_service.remove_item(db, alice_id, bobs.id)
        with pytest.raises(NotFoundError) as missing:
            cart_service.remove_item(db, alice_id, 9999)

        assert foreign.value.message == missing.value.message
        assert foreign.value.status_code == missing.value.status_code
        assert cart_service.count(db, bob_id) == 1

    @pytest.mark.parametrize("item_id", ["abc", "0", "-3", "1.5"])
    def test_remove_invalid_id(self, db, alice_id, item_id):
        with pytest.raises(ValidationError, match="Invalid item ID"):
            cart_service.remove_item(db, alice_id, item_id)

    def test_clear_all(self, db, alice_id, bob_id, products):
        cart_service.add_item(db, alice_id, 1)
        cart_service.add_item(db, alice_id, 2)
        cart_service.add_item(db, bob_id, 2)

        assert cart_service.clear_all(db, alice_id) == 2
        assert cart_service.list_items(db, alice_id) == []
        assert cart_service.clear_all(db, alice_id) == 0
        assert cart_service.count(db, bob_id) == 1
