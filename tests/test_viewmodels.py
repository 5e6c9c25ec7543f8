"""
Tests for View-Models

Tests for main-context marshaling, error signalling and completion
ordering.
"""

import sys
import threading
from pathlib import Path

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from di_network.api import Failure, HttpxApiService, Success, TransportError
from di_network.models import Post, Product, ProductResponse
from di_network.services import PostService, ProductService
from di_network.viewmodels import MainContext, PostViewModel, ProductViewModel


class TestMainContext:
    """Tests for MainContext."""

    def test_runs_in_posting_order(self, main_context):
        """Test that queued callables run in the order they were posted."""
        calls = []
        main_context.post(calls.append, 1)
        main_context.post(calls.append, 2)

        assert calls == []
        assert main_context.run_pending() == 2
        assert calls == [1, 2]
        assert main_context.run_pending() == 0

    def test_runs_on_owning_thread(self, main_context):
        """Test that work posted from a worker executes on the draining thread."""
        ran_on = []
        worker = threading.Thread(
            target=main_context.post,
            args=(lambda: ran_on.append(threading.get_ident()),)
        )
        worker.start()
        worker.join()

        assert main_context.pending == 1
        main_context.run_pending()

        assert ran_on == [threading.get_ident()]

    def test_run_until_waits_for_worker(self, main_context):
        """Test that run_until blocks until a worker-posted update satisfies the predicate."""
        state = {"done": False}

        def finish():
            state["done"] = True

        worker = threading.Timer(0.05, main_context.post, args=(finish,))
        worker.start()

        assert main_context.run_until(lambda: state["done"], timeout=5)
        worker.join()

    def test_run_until_returns_immediately_when_satisfied(self, main_context):
        """Test that a predicate that already holds does not wait."""
        assert main_context.run_until(lambda: True, timeout=0)

    def test_run_until_timeout(self, main_context):
        """Test that run_until gives up once the timeout expires."""
        calls = []
        main_context.post(calls.append, 1)

        assert not main_context.run_until(lambda: False, timeout=0.05)
        assert calls == [1]


class TestProductViewModel:
    """Tests for ProductViewModel."""

    @pytest.fixture
    def view_model(self, stub_api, main_context):
        """Create a ProductViewModel over the stub ApiService."""
        return ProductViewModel(ProductService(stub_api), main_context)

    def test_initial_state(self, view_model):
        """Test that a new view-model holds nothing and no error."""
        assert view_model.products == []
        assert view_model.selected_product is None
        assert not view_model.has_error
        assert not view_model.show_alert
        assert view_model.error_message == ""

    def test_success_applied_on_main_context(self, view_model, stub_api, main_context):
        """Test that fetched products only appear once the main context runs."""
        view_model.fetch_all_products()
        stub_api.resolve(0, Success(ProductResponse(products=[Product(id=1, name="A")])))

        assert view_model.products == []

        main_context.run_pending()

        assert view_model.products == [Product(id=1, name="A")]
        assert not view_model.has_error

    def test_failure_keeps_collection_and_sets_error(self, view_model, stub_api, main_context):
        """Test that a failed fetch leaves the held products untouched."""
        view_model.products = [Product(id=9, name="Old")]

        view_model.fetch_all_products()
        stub_api.resolve(0, Failure(TransportError("offline")))
        main_context.run_pending()

        assert view_model.products == [Product(id=9, name="Old")]
        assert view_model.has_error
        assert view_model.show_alert
        assert view_model.error_message == "offline"

    def test_success_clears_previous_error(self, view_model, stub_api, main_context):
        """Test that a later successful fetch resets the error flag."""
        view_model.fetch_all_products()
        stub_api.resolve(0, Failure(TransportError("offline")))
        main_context.run_pending()

        view_model.fetch_all_products()
        stub_api.resolve(1, Success(ProductResponse(products=[])))
        main_context.run_pending()

        assert not view_model.has_error
        assert view_model.error_message == ""

    def test_last_completed_fetch_wins(self, view_model, stub_api, main_context):
        """Test that overlapping fetches resolve to the last completion, not the last request."""
        first = [Product(id=1, name="First")]
        second = [Product(id=2, name="Second")]

        view_model.fetch_all_products()
        view_model.fetch_all_products()

        # Second request completes before the first one
        stub_api.resolve(1, Success(ProductResponse(products=second)))
        stub_api.resolve(0, Success(ProductResponse(products=first)))
        main_context.run_pending()

        assert view_model.products == first

    def test_dismiss_alert(self, view_model, stub_api, main_context):
        """Test that dismissing the alert keeps the error flag."""
        view_model.fetch_all_products()
        stub_api.resolve(0, Failure(TransportError("offline")))
        main_context.run_pending()

        view_model.dismiss_alert()

        assert not view_model.show_alert
        assert view_model.has_error

    def test_select(self, view_model):
        """Test selecting a product."""
        product = Product(id=1, name="A")

        view_model.select(product)

        assert view_model.selected_product is product

    def test_server_error_over_http(self, main_context):
        """Test that HTTP 500 leaves the held collection unchanged."""
        api = HttpxApiService(
            client=httpx.Client(transport=httpx.MockTransport(
                lambda request: httpx.Response(500, json={"error": "down"})
            ))
        )
        view_model = ProductViewModel(ProductService(api, "https://api.test/products"), main_context)
        view_model.products = [Product(id=9, name="Old")]

        with api:
            view_model.fetch_all_products().result(timeout=5)
        main_context.run_pending()

        assert view_model.products == [Product(id=9, name="Old")]
        assert view_model.has_error
        assert "500" in view_model.error_message

    def test_undecodable_body_over_http(self, main_context):
        """Test that a body that cannot be decoded still reaches the error fields."""
        body = {"products": [{"id": 1, "name": "A", "price": 10 ** 400}]}
        api = HttpxApiService(
            client=httpx.Client(transport=httpx.MockTransport(
                lambda request: httpx.Response(200, json=body)
            ))
        )
        view_model = ProductViewModel(ProductService(api, "https://api.test/products"), main_context)

        with api:
            view_model.fetch_all_products().result(timeout=5)

        assert main_context.run_until(lambda: view_model.has_error, timeout=1)
        assert view_model.products == []
        assert view_model.show_alert


class TestPostViewModel:
    """Tests for PostViewModel."""

    @pytest.fixture
    def view_model(self, stub_api, main_context):
        """Create a PostViewModel over the stub ApiService."""
        return PostViewModel(PostService(stub_api, "https://api.test/posts"), main_context)

    def test_fetch_with_parameters(self, view_model, stub_api, main_context):
        """Test fetching posts filtered by user."""
        posts = [Post(user_id=3, id=11, title="t", body="b")]

        view_model.fetch_all_posts({"userId": 3})
        stub_api.resolve(0, Success(posts))
        main_context.run_pending()

        assert stub_api.calls == [("GET", "https://api.test/posts", {"userId": 3})]
        assert view_model.posts == posts

    def test_add_post_appends_on_success(self, view_model, stub_api, main_context):
        """Test that an accepted post is appended locally."""
        existing = Post(user_id=1, id=1, title="a", body="b")
        new_post = Post(user_id=2, id=24, title="Draft", body="Content")
        view_model.posts = [existing]

        view_model.add_post(new_post)
        stub_api.resolve(0, Success(None))
        main_context.run_pending()

        assert view_model.posts == [existing, new_post]

    def test_add_post_failure(self, view_model, stub_api, main_context):
        """Test that a rejected post is not appended and raises the error flag."""
        view_model.add_post(Post(user_id=2, id=24, title="Draft", body="Content"))
        stub_api.resolve(0, Failure(TransportError("offline")))
        main_context.run_pending()

        assert view_model.posts == []
        assert view_model.has_error

    def test_select(self, view_model):
        """Test selecting a post."""
        post = Post(user_id=1, id=1, title="a", body="b")

        view_model.select(post)

        assert view_model.selected_post is post


if __name__ == "__main__":
    pytest.main([__file__, "-v", "-s"])
