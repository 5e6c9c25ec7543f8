"""
Main Entry Point

Composition root for the DI Network Manager:

1. Build one ApiService backend (httpx or requests)
2. Inject it into a resource service
3. Inject the service into a view-model
4. Fetch, then apply the result on the main context
5. Report what the view-model now holds

Run with ``python -m di_network.main --backend requests --resource posts``.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from .api import ApiService, BaseApiService, HttpxApiService, RequestsApiService
from .config import config
from .services import PostService, ProductService
from .viewmodels import MainContext, PostViewModel, ProductViewModel


BACKENDS = {
    "httpx": HttpxApiService,
    "requests": RequestsApiService,
}


def setup_logging(log_level: str = "INFO") -> logging.Logger:
    """Set up logging for the application."""
    config.log.log_directory.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger("di_network")
    logger.setLevel(getattr(logging, log_level.upper()))

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s",
        datefmt="%H:%M:%S"
    ))

    # File handler
    file_handler = logging.FileHandler(
        config.log.log_file_path,
        mode='w',
        encoding='utf-8'
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(config.log.log_format))

    logger.addHandler(console_handler)
    logger.addHandler(file_handler)

    return logger


@dataclass
class FetchReport:
    """What the view-model held after one fetch."""
    backend: str
    resource: str
    success: bool
    item_count: int
    error: Optional[str]


def build_api_service(backend: str) -> BaseApiService:
    """
    Create the ApiService backend named ``backend``.

    Raises:
        ValueError: If the backend name is unknown.
    """
    try:
        factory = BACKENDS[backend]
    except KeyError:
        raise ValueError(
            f"Unknown backend '{backend}' (expected one of: {', '.join(BACKENDS)})"
        ) from None
    return factory()


def fetch(
    api_service: ApiService,
    resource: str,
    main_context: MainContext,
    user_id: Optional[int] = None,
    timeout: Optional[float] = None
) -> FetchReport:
    """
    Wire a service and view-model around ``api_service`` and run one fetch.

    Blocks until the request completes, then applies its update on
    ``main_context`` from the calling thread.
    """
    timeout = timeout or config.api.timeout_seconds * 2
    backend = getattr(api_service, "name", type(api_service).__name__)

    if resource == "products":
        view_model = ProductViewModel(ProductService(api_service), main_context)
        future = view_model.fetch_all_products()
        collection = "products"
    elif resource == "posts":
        view_model = PostViewModel(PostService(api_service), main_context)
        parameters = {"userId": user_id} if user_id is not None else None
        future = view_model.fetch_all_posts(parameters)
        collection = "posts"
    else:
        raise ValueError(f"Unknown resource '{resource}'")

    future.result(timeout=timeout)
    main_context.run_pending()

    return FetchReport(
        backend=backend,
        resource=resource,
        success=not view_model.has_error,
        item_count=len(getattr(view_model, collection)),
        error=view_model.error_message or None
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch a resource through an injected ApiService")
    parser.add_argument("--backend", choices=sorted(BACKENDS),
                        default=config.api.default_backend, help="HTTP backend to inject")
    parser.add_argument("--resource", choices=["products", "posts"],
                        default="products", help="Resource collection to fetch")
    parser.add_argument("--user-id", type=int, default=None,
                        help="Only fetch posts by this user")
    parser.add_argument("--log-level", default=config.log.log_level,
                        help="Console log level")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_args(argv)
    logger = setup_logging(args.log_level)

    try:
        with build_api_service(args.backend) as api_service:
            report = fetch(api_service, args.resource, MainContext(), user_id=args.user_id)

        if report.success:
            logger.info(f"Fetched {report.item_count} {report.resource} via {report.backend}")
            sys.exit(0)
        else:
            logger.error(f"Fetching {report.resource} failed: {report.error}")
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(130)

    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
