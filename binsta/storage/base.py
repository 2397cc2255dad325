# storage/base.py
from abc import ABC, abstractmethod
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel

from ..transport import Transport

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResourceClient(ABC):
    """
    Abstract base class for a client of one kind of remote node.
    Defines the common interface that the files and folders clients implement,
    and the helpers that turn raw response bodies into typed records.
    """

    def __init__(self, transport: Transport):
        self.transport = transport

    @abstractmethod
    def get(self, node_id: str) -> BaseModel:
        """
        Fetches the metadata of a single node.

        :param node_id: The ID of the node to fetch.
        :return: The typed record of the node.
        """
        pass

    @abstractmethod
    def create(self, payload: Optional[BaseModel] = None, **fields) -> BaseModel:
        """
        Creates a new node record.

        :param payload: The creation payload; keyword fields are used when omitted.
        :return: The typed record of the created node.
        """
        pass

    def _get_model(self, path: str, model: Type[ModelT]) -> ModelT:
        return model.model_validate(self.transport.get(path))

    def _post_model(self, path: str, body: Any, model: Type[ModelT]) -> ModelT:
        if isinstance(body, BaseModel):
            # Unset fields fall back to the server defaults.
            body = body.model_dump(exclude_none=True)
        return model.model_validate(self.transport.post(path, json=body))
