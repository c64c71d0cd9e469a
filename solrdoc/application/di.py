from dishka import AsyncContainer, make_async_container

from solrdoc.config import Config
from solrdoc.infrastructure.di import DocumentProvider


def create_container(config: Config | None = None) -> AsyncContainer:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()

    return make_async_container(
        DocumentProvider(),
        context={Config: config},
    )
