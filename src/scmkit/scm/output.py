"""
Output destinations for a response body.

A call either decodes the JSON body into a typed value (DecodeInto) or
copies the body bytes verbatim into a writable sink (CopyRawInto). The
caller picks the variant explicitly.
"""

from abc import ABC, abstractmethod
from typing import Any, BinaryIO, Generic, Optional, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from .client import Response
from .errors import DecodeError

T = TypeVar('T')


class OutputDestination(ABC):
    """Where the body of a successful response goes"""

    @abstractmethod
    async def consume(self, response: Response) -> None:
        """
        Consume the response body.

        Args:
            response: Open response, status already classified as success
        """
        pass


class DecodeInto(OutputDestination, Generic[T]):
    """
    Decode a JSON body into a typed value.

    The shape can be any type pydantic understands: a model, a dataclass,
    List[Model], Dict[str, Any], or Any for plain JSON. The decoded value
    is stored on `value`.

    Example:
        out = DecodeInto(List[Issue])
        await client.do("GET", "api/v1/repos/o/r/issues", out=out)
        issues = out.value
    """

    def __init__(self, shape: Type[T] = Any):
        self.shape = shape
        self.value: Optional[T] = None
        self._adapter: TypeAdapter = TypeAdapter(shape)

    async def consume(self, response: Response) -> None:
        body = await response.read()
        try:
            self.value = self._adapter.validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"Cannot decode response from {response.url}: {e}") from e


class CopyRawInto(OutputDestination):
    """Copy the body verbatim into a writable byte sink (e.g. io.BytesIO)"""

    def __init__(self, sink: BinaryIO):
        self.sink = sink

    async def consume(self, response: Response) -> None:
        async for chunk in response.iter_bytes():
            self.sink.write(chunk)
