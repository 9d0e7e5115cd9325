"""Storefront load test scenarios.

Four stateful SequentialTaskSet journeys: catalogue browsing, cart editing,
cart-to-order checkout and the style quiz. ``StorefrontUser`` mixes them with
weights that model a typical shop's traffic. The store must be seeded first
(``python src/manage.py seed``).
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import cart_item_data, checkout_data, quiz_answers
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import QuizState, ShopperState


class _ShopperJourney(SequentialTaskSet):
    """Opens a session cart and loads the catalogue before the journey's tasks run."""

    def on_start(self):
        self.state = ShopperState()
        with self.client.get("/api/cart", catch_response=True, name="GET /api/cart") as resp:
            if resp.status_code != 200:
                resp.failure(f"Open cart failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()
                return
            self.state.session_id = resp.headers.get("X-Session-ID")

        with self.client.get("/api/products", catch_response=True, name="GET /api/products") as resp:
            if resp.status_code != 200 or not resp.json():
                resp.failure("Catalogue is empty; seed the store first")
                self.interrupt()
                return
            self.state.products = resp.json()

    def add_random_item(self):
        product = random.choice(self.state.products)
        with self.client.post(
            "/api/cart/items",
            json=cart_item_data(product),
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/cart/items",
        ) as resp:
            if resp.status_code == 201:
                item_id = resp.json()["id"]
                if item_id not in self.state.item_ids:
                    self.state.item_ids.append(item_id)
            else:
                resp.failure(f"Add cart item failed: {resp.status_code}: {extract_error_detail(resp)}")


class BrowsingJourney(SequentialTaskSet):
    """Featured -> Product Detail -> Collection -> Category.

    Read-only traffic; the most common journey.
    """

    @task
    def featured(self):
        with self.client.get("/api/products/featured", catch_response=True, name="GET /api/products/featured") as resp:
            if resp.status_code != 200:
                resp.failure(f"Featured failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()
                return
            self.products = resp.json() or []

    @task
    def product_detail(self):
        if not self.products:
            self.interrupt()
            return
        self.product = random.choice(self.products)
        self.client.get(f"/api/products/{self.product['id']}", name="GET /api/products/{id}")

    @task
    def collection(self):
        self.client.get(f"/api/collections/{self.product['collection']}", name="GET /api/collections/{name}")

    @task
    def category(self):
        self.client.get(f"/api/categories/{self.product['category']}", name="GET /api/categories/{name}")

    @task
    def done(self):
        self.interrupt()


class CartEditingJourney(_ShopperJourney):
    """Open Cart -> Add Items -> Update Quantity -> Remove Item -> View Cart.

    Models a shopper who fills a cart, changes their mind and leaves.
    """

    @task
    def add_item_1(self):
        self.add_random_item()

    @task
    def add_item_2(self):
        self.add_random_item()

    @task
    def update_quantity(self):
        if not self.state.item_ids:
            return
        with self.client.put(
            f"/api/cart/items/{self.state.item_ids[0]}",
            json={"quantity": random.randint(1, 4)},
            headers=self.state.headers,
            catch_response=True,
            name="PUT /api/cart/items/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update quantity failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def remove_item(self):
        if not self.state.item_ids:
            return
        item_id = self.state.item_ids.pop()
        with self.client.delete(
            f"/api/cart/items/{item_id}",
            headers=self.state.headers,
            catch_response=True,
            name="DELETE /api/cart/items/{id}",
        ) as resp:
            if resp.status_code != 204:
                resp.failure(f"Remove item failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def view_cart(self):
        self.client.get("/api/cart", headers=self.state.headers, name="GET /api/cart")

    @task
    def done(self):
        self.interrupt()


class CheckoutJourney(_ShopperJourney):
    """Open Cart -> Add Items -> Place Order -> View Order -> Advance Status.

    The conversion path. Each order is placed against live catalogue prices.
    """

    @task
    def add_items(self):
        for _ in range(random.randint(1, 3)):
            self.add_random_item()

    @task
    def place_order(self):
        with self.client.post(
            "/api/orders",
            json=checkout_data(),
            headers=self.state.headers,
            catch_response=True,
            name="POST /api/orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["order"]["id"]
            else:
                resp.failure(f"Place order failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def view_order(self):
        self.client.get(f"/api/orders/{self.state.order_id}", name="GET /api/orders/{id}")

    @task
    def mark_processing(self):
        with self.client.put(
            f"/api/orders/{self.state.order_id}/status",
            json={"status": "processing"},
            catch_response=True,
            name="PUT /api/orders/{id}/status",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Status change failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class QuizJourney(SequentialTaskSet):
    """List Quizzes -> Take Quiz -> Get Recommendation."""

    def on_start(self):
        self.state = QuizState()

    @task
    def list_quizzes(self):
        with self.client.get("/api/quizzes", catch_response=True, name="GET /api/quizzes") as resp:
            if resp.status_code != 200 or not resp.json():
                resp.failure("No quizzes available; seed the store first")
                self.interrupt()
                return
            self.state.quiz_id = random.choice(resp.json())["id"]

    @task
    def take_quiz(self):
        with self.client.get(
            f"/api/quizzes/{self.state.quiz_id}", catch_response=True, name="GET /api/quizzes/{id}"
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Load quiz failed: {resp.status_code}: {extract_error_detail(resp)}")
                self.interrupt()
                return
            self.state.quiz_view = resp.json()

    @task
    def recommend(self):
        with self.client.post(
            f"/api/quizzes/{self.state.quiz_id}/recommendation",
            json={"answers": quiz_answers(self.state.quiz_view)},
            catch_response=True,
            name="POST /api/quizzes/{id}/recommendation",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Recommendation failed: {resp.status_code}: {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class StorefrontUser(HttpUser):
    """Mixed storefront workload.

    Browsing dominates; roughly one in five sessions edits a cart and about one
    in eight checks out.
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        BrowsingJourney: 10,
        CartEditingJourney: 4,
        CheckoutJourney: 2,
        QuizJourney: 2,
    }
