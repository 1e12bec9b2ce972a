from __future__ import annotations

import logging
from contextlib import contextmanager
from importlib.metadata import PackageNotFoundError, version
from typing import Iterator

from dependency_injector import containers, providers

from ..config.settings import AppConfig
from ..config.tokens import preview_token
from ..config.urls import get_base_url
from ..infra.http_client import HttpClient
from ..infra.vulncheck_adapter import VulnCheckAdapter

logger = logging.getLogger(__name__)


def _user_agent() -> str:
	try:
		return f"vulncheck-examples/{version('vulncheck-examples')}"
	except PackageNotFoundError:
		return "vulncheck-examples"


def http_client_resource(api_token, timeout_seconds):
	"""Create the HTTP client as a resource with proper cleanup.

	The bearer token is attached when present. Without one the request is still
	sent and the API decides how to answer.
	"""
	headers = {"Accept": "application/json", "User-Agent": _user_agent()}
	if api_token:
		logger.info(f"API token found: {preview_token(api_token)} (length: {len(api_token)})")
		headers["Authorization"] = f"Bearer {api_token}"
	else:
		logger.warning("No API token configured - set VULNCHECK_API_TOKEN in your environment or .env file")

	client = HttpClient(base_headers=headers, timeout_seconds=timeout_seconds)
	try:
		yield client
	finally:
		logger.debug("Closing HTTP client")
		client.close()


class Container(containers.DeclarativeContainer):
	config = providers.Configuration()

	http_client = providers.Resource(
		http_client_resource,
		api_token=config.api_token,
		timeout_seconds=config.timeout_seconds,
	)

	base_url = providers.Callable(
		get_base_url,
		scheme=config.scheme,
		host=config.host,
		base_path=config.base_path,
	)

	vulncheck = providers.Factory(VulnCheckAdapter, http_client=http_client, base_url=base_url)


@contextmanager
def provide_container(config: AppConfig | None = None) -> Iterator[Container]:
	"""Create and initialize a DI container.

	Args:
		config: Optional AppConfig. If None, configuration is read from the
			environment at call time (after any .env file has been loaded).
	"""
	container = Container()
	container.config.from_pydantic(config or AppConfig())
	container.init_resources()
	try:
		yield container
	finally:
		container.shutdown_resources()


@contextmanager
def provide_client(config: AppConfig | None = None) -> Iterator[VulnCheckAdapter]:
	with provide_container(config) as container:
		yield container.vulncheck()
