import unittest
from decimal import Decimal

from support import SETTINGS, logged_in_navigator, make_navigator
from shop.errors import InvalidCredentialsError, OutOfStockError, ValidationError
from shop.screens import ProductsPage


class SplashAndLoginTestCase(unittest.TestCase):
    def setUp(self):
        self.nav, self.scheduler = make_navigator()

    def test_starts_on_splash_without_user(self):
        self.assertEqual(self.nav.screen, "splash")
        self.assertIsNone(self.nav.user)
        self.assertTrue(self.nav.cart.is_empty)

    def test_splash_moves_to_login_after_delay(self):
        self.nav.start()
        self.scheduler.advance(SETTINGS.splash_delay - 0.1)
        self.assertEqual(self.nav.screen, "splash")
        self.scheduler.advance(0.1)
        self.assertEqual(self.nav.screen, "login")

    def _to_login(self):
        self.nav.start()
        self.scheduler.advance(SETTINGS.splash_delay)

    def test_login_success_after_auth_delay(self):
        self._to_login()
        self.nav.login("devicelab", "robustest")

        self.assertTrue(self.nav.authenticating)
        self.assertEqual(self.nav.screen, "login")
        self.assertIsNone(self.nav.user)

        self.scheduler.advance(SETTINGS.auth_delay)
        self.assertFalse(self.nav.authenticating)
        self.assertEqual(self.nav.screen, "products")
        self.assertEqual(self.nav.user.username, "devicelab")

    def test_login_wrong_password_stays_on_login(self):
        self._to_login()
        self.nav.login("devicelab", "wrong")
        self.scheduler.advance(SETTINGS.auth_delay)

        self.assertEqual(self.nav.screen, "login")
        self.assertIsNone(self.nav.user)
        self.assertIsInstance(self.nav.last_error, InvalidCredentialsError)

        self.nav.clear_error()
        self.assertIsNone(self.nav.last_error)

    def test_login_empty_field_fails_immediately(self):
        self._to_login()
        with self.assertRaises(ValidationError) as ctx:
            self.nav.login("devicelab", "")
        self.assertEqual(ctx.exception.field, "password")
        self.assertIs(self.nav.last_error, ctx.exception)
        self.assertFalse(self.nav.authenticating)
        self.assertEqual(self.scheduler.pending, [])

    def test_second_attempt_replaces_pending_one(self):
        self._to_login()
        self.nav.login("devicelab", "wrong")
        self.scheduler.advance(SETTINGS.auth_delay / 2)
        self.nav.login("devicelab", "robustest")
        self.scheduler.advance(SETTINGS.auth_delay / 2)
        # first attempt was cancelled, no error surfaced
        self.assertIsNone(self.nav.last_error)
        self.scheduler.advance(SETTINGS.auth_delay)
        self.assertEqual(self.nav.screen, "products")

    def test_intents_before_login_are_ignored(self):
        self._to_login()
        self.nav.go_to_cart()
        self.nav.go_back()
        self.assertFalse(self.nav.logout(confirmed=True))
        self.assertEqual(self.nav.screen, "login")


class BrowsingTestCase(unittest.TestCase):
    def setUp(self):
        self.nav, self.scheduler = logged_in_navigator()

    def test_add_twice(self):
        self.nav.add_to_cart("Appium")
        self.nav.add_to_cart("Appium")
        self.assertEqual(len(self.nav.cart), 1)
        self.assertEqual(self.nav.cart.quantity_of("Appium"), 2)
        self.assertEqual(self.nav.cart_total(), Decimal("15.00"))

    def test_mixed_cart_totals(self):
        self.nav.add_to_cart("Appium")
        self.nav.add_to_cart("Appium")
        self.nav.add_to_cart("Espresso")
        self.assertEqual(self.nav.cart_total(), Decimal("16.50"))
        self.assertEqual(self.nav.cart_item_count(), 3)

    def test_out_of_stock(self):
        with self.assertRaises(OutOfStockError):
            self.nav.add_to_cart("Playwright")
        self.assertTrue(self.nav.cart.is_empty)
        self.assertIsInstance(self.nav.last_error, OutOfStockError)

        # next accepted intent clears it
        self.nav.add_to_cart("Appium")
        self.assertIsNone(self.nav.last_error)

    def test_unknown_product(self):
        with self.assertRaises(ValidationError):
            self.nav.select_product("JUnit")
        self.assertEqual(self.nav.screen, "products")

    def test_detail_and_back(self):
        self.nav.select_product("Cypress")
        self.assertEqual(self.nav.screen, "detail")
        self.assertEqual(self.nav.selected_product.id, "Cypress")

        self.nav.add_to_cart("Cypress")
        self.nav.go_back()
        self.assertEqual(self.nav.screen, "products")
        self.assertIsNone(self.nav.selected_product)
        self.assertEqual(self.nav.cart.quantity_of("Cypress"), 1)

    def test_cart_from_detail_drops_selection(self):
        self.nav.select_product("Cypress")
        self.nav.go_to_cart()
        self.assertEqual(self.nav.screen, "cart")
        self.assertIsNone(self.nav.selected_product)
        self.nav.go_back()
        self.assertEqual(self.nav.screen, "products")

    def test_back_on_products_is_noop(self):
        self.nav.go_back()
        self.assertEqual(self.nav.screen, "products")

    def test_search_is_debounced(self):
        everything = self.nav.visible_products()
        self.nav.set_search_query("sel")
        self.assertEqual(self.nav.search_text, "sel")
        self.assertEqual(self.nav.visible_products(), everything)

        self.scheduler.advance(0.2)
        self.nav.set_search_query("selen")
        self.scheduler.advance(0.2)
        self.assertEqual(self.nav.visible_products(), everything)

        self.scheduler.advance(0.1)
        self.assertEqual([p.id for p in self.nav.visible_products()], ["Selenium"])

    def test_category_applies_immediately(self):
        self.nav.set_category("Unit Testing")
        self.assertEqual([p.id for p in self.nav.visible_products()], ["Jest", "Mocha"])
        self.assertEqual(self.nav.category, "Unit Testing")

        with self.assertRaises(ValidationError):
            self.nav.set_category("Mainframe Testing")
        self.assertEqual(self.nav.category, "Unit Testing")

    def test_leaving_products_cancels_debounce_and_resets_filter(self):
        self.nav.set_category("Web Testing")
        self.nav.set_search_query("jest")
        self.nav.select_product("Appium")
        self.scheduler.advance(1.0)
        self.assertEqual(self.nav.screen, "detail")
        self.assertEqual(self.scheduler.pending, [])

        self.nav.go_back()
        self.assertEqual(self.nav.page, ProductsPage())
        self.assertEqual(len(self.nav.visible_products()), len(self.nav.catalog))

    def test_intent_on_wrong_screen_is_ignored(self):
        self.nav.add_to_cart("Appium")
        self.nav.checkout()
        self.nav.submit_payment("4111")
        self.assertEqual(self.nav.screen, "products")
        self.nav.go_to_cart()
        self.nav.set_search_query("x")
        self.assertEqual(self.nav.search_text, "")
        self.assertEqual(self.scheduler.pending, [])

    def test_listeners(self):
        seen = []
        unsubscribe = self.nav.subscribe(lambda old, new: seen.append((old, new)))
        self.nav.select_product("Jest")
        self.nav.go_to_cart()
        unsubscribe()
        self.nav.go_back()
        self.assertEqual(seen, [("products", "detail"), ("detail", "cart")])


class CheckoutTestCase(unittest.TestCase):
    def setUp(self):
        self.nav, self.scheduler = logged_in_navigator()
        self.nav.add_to_cart("Appium")
        self.nav.add_to_cart("Appium")
        self.nav.add_to_cart("Espresso")
        self.nav.go_to_cart()

    def test_checkout_with_empty_cart_is_rejected(self):
        self.nav.remove_from_cart("Appium")
        self.nav.remove_from_cart("Appium")
        self.nav.remove_from_cart("Espresso")
        with self.assertRaises(ValidationError) as ctx:
            self.nav.checkout()
        self.assertEqual(ctx.exception.field, "cart")
        self.assertEqual(self.nav.screen, "cart")

    def test_address_guard(self):
        self.nav.checkout()
        with self.assertRaises(ValidationError):
            self.nav.submit_address("", "city", "zip")
        self.assertEqual(self.nav.screen, "address")
        self.assertIsNone(self.nav.shipping_draft)

    def test_payment_guard(self):
        self.nav.checkout()
        self.nav.submit_address("1 Main St", "Springfield", "12345")
        with self.assertRaises(ValidationError):
            self.nav.submit_payment("")
        self.assertEqual(self.nav.screen, "payment")
        self.assertIsNone(self.nav.order_summary)
        self.assertEqual(self.nav.cart_item_count(), 3)

    def test_back_steps_keep_drafts(self):
        self.nav.checkout()
        self.nav.submit_address("1 Main St", "Springfield", "12345")
        draft = self.nav.shipping_draft

        self.nav.go_back()
        self.assertEqual(self.nav.screen, "address")
        self.assertIs(self.nav.shipping_draft, draft)

        self.nav.go_back()
        self.assertEqual(self.nav.screen, "cart")
        self.assertIs(self.nav.shipping_draft, draft)

        self.nav.checkout()
        self.nav.submit_address("2 Side St", "Springfield", "12345")
        self.assertEqual(self.nav.shipping_draft.address, "2 Side St")

    def test_back_to_catalog_drops_drafts(self):
        self.nav.checkout()
        self.nav.submit_address("1 Main St", "Springfield", "12345")
        self.nav.go_back()
        self.nav.go_back()
        self.assertIsNotNone(self.nav.shipping_draft)

        self.nav.go_back()
        self.assertEqual(self.nav.screen, "products")
        self.assertIsNone(self.nav.shipping_draft)
        self.assertIsNone(self.nav.payment_draft)
        self.assertEqual(self.nav.cart_item_count(), 3)

    def test_full_checkout(self):
        total, count = self.nav.cart_total(), self.nav.cart_item_count()
        self.nav.checkout()
        self.nav.submit_address("1 Main St", "Springfield", "12345")
        summary = self.nav.submit_payment("4111 1111 1111 1111")

        self.assertEqual(self.nav.screen, "checkout_success")
        self.assertIs(self.nav.order_summary, summary)
        self.assertEqual(summary.total, total)
        self.assertEqual(summary.item_count, count)
        self.assertTrue(self.nav.cart.is_empty)

        self.nav.continue_shopping()
        self.assertEqual(self.nav.screen, "products")
        self.assertTrue(self.nav.cart.is_empty)
        self.assertIsNone(self.nav.order_summary)
        self.assertIsNone(self.nav.shipping_draft)
        self.assertIsNone(self.nav.payment_draft)
        self.assertEqual(self.nav.user.username, "devicelab")

    def test_back_from_success_continues_shopping(self):
        self.nav.checkout()
        self.nav.submit_address("1 Main St", "Springfield", "12345")
        self.nav.submit_payment("4111")
        self.nav.go_back()
        self.assertEqual(self.nav.screen, "products")
        self.assertIsNone(self.nav.shipping_draft)


class LogoutAndRecoveryTestCase(unittest.TestCase):
    def setUp(self):
        self.nav, self.scheduler = logged_in_navigator()
        self.nav.add_to_cart("Jest")
        self.nav.go_to_cart()
        self.nav.checkout()
        self.nav.submit_address("1 Main St", "Springfield", "12345")

    def test_logout_needs_confirmation(self):
        self.assertFalse(self.nav.logout())
        self.assertEqual(self.nav.screen, "payment")
        self.assertIsNotNone(self.nav.user)

    def test_logout_resets_session(self):
        self.assertTrue(self.nav.logout(confirmed=True))
        self.assertEqual(self.nav.screen, "login")
        self.assertIsNone(self.nav.user)
        self.assertTrue(self.nav.cart.is_empty)
        self.assertIsNone(self.nav.shipping_draft)
        self.assertIsNone(self.nav.selected_product)
        self.assertIsNone(self.nav.order_summary)

    def test_logout_cancels_pending_search(self):
        self.nav.go_back()
        self.nav.go_back()
        self.nav.go_back()
        self.assertEqual(self.nav.screen, "products")
        self.nav.set_search_query("jest")
        self.nav.logout(confirmed=True)
        self.assertEqual(self.scheduler.pending, [])

    def test_unknown_screen_falls_back_to_splash(self):
        class BogusPage:
            screen = "settings"

        self.nav._show(BogusPage())
        self.assertEqual(self.nav.screen, "splash")
        self.assertIsNone(self.nav.user)
        self.assertTrue(self.nav.cart.is_empty)

        self.scheduler.advance(SETTINGS.splash_delay)
        self.assertEqual(self.nav.screen, "login")


if __name__ == "__main__":
    unittest.main()
