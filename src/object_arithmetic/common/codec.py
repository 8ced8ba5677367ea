"""Encode and decode sequences of operations as JSON."""
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from object_arithmetic.common.logger import logger
from object_arithmetic.common.models import Operation


# Validates and serializes a list of operations in one pass
OPERATION_LIST: TypeAdapter[List[Operation]] = TypeAdapter(List[Operation])


class OperationCodec(BaseModel):
    """
    Convert operations to and from their record form.

    Each record carries the defining fields "a", "b" and "mode" (the mode's lower-case name),
    plus the derived "symbol" and "result". Derived fields are ignored when decoding and
    recomputed from the defining ones.

    Decoding also accepts records written by other tools: "Mode" instead of "mode",
    the mode given as a name in any case or as an ordinal (0 = addition ... 4 = modulo).
    """

    # Make the Pydantic instance immutable (read-only)
    model_config = ConfigDict(frozen=True)

    indent: Optional[int] = Field(default=None, ge=0, description="JSON indentation, compact if None")

    def encode(self, operations: Iterable[Operation]) -> str:
        """
        Serialize operations to a JSON array.

        :param Iterable[Operation] operations: Operations to encode

        :return: JSON text
        :rtype: str
        """
        items: List[Operation] = list(operations)
        payload: bytes = OPERATION_LIST.dump_json(items, indent=self.indent)
        logger.debug(f"Encoded {len(items)} operation(s) to JSON")
        return payload.decode()

    def decode(self, payload: Union[str, bytes]) -> List[Operation]:
        """
        Deserialize operations from a JSON array.

        :param payload: JSON text or bytes

        :return: Decoded operations
        :rtype: List[Operation]
        :raises pydantic.ValidationError: If the payload is not a valid list of operation records
        """
        operations: List[Operation] = OPERATION_LIST.validate_json(payload)
        logger.debug(f"Decoded {len(operations)} operation(s) from JSON")
        return operations

    def dump(self, operations: Iterable[Operation]) -> List[Dict[str, Any]]:
        """
        Convert operations to plain Python records.

        Non-finite operands stay Python inf/nan floats; use encode() for JSON text.

        :param Iterable[Operation] operations: Operations to convert

        :return: One dict per operation
        :rtype: List[Dict[str, Any]]
        """
        return OPERATION_LIST.dump_python(list(operations), mode="json")

    def load(self, records: Iterable[Dict[str, Any]]) -> List[Operation]:
        """
        Build operations from records.

        :param records: Mappings with "a", "b" and "mode" keys

        :return: Operations built from the records
        :rtype: List[Operation]
        :raises pydantic.ValidationError: If a record is invalid
        """
        return OPERATION_LIST.validate_python(list(records))
