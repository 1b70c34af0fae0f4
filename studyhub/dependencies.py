"""FastAPI dependencies for the application."""

from typing import Annotated

from fastapi import Depends, Request

from studyhub.storage import StorageProtocol


def get_storage(request: Request) -> StorageProtocol:
    """Get the storage attached to the running application."""
    return request.app.state.storage


# Type alias for storage dependency
Storage = Annotated[StorageProtocol, Depends(get_storage)]
