"""
Sample driver.

Builds a few operations through each construction path and prints them as JSON.
"""
from typing import List

from object_arithmetic.common.codec import OperationCodec
from object_arithmetic.common.logger import logger, setup_logging
from object_arithmetic.common.models import Operation
from object_arithmetic.common.operations import OperationMode


def build_samples() -> List[Operation]:
    """
    Create the sample operations.

    :return: Operations parsed from text and built from explicit fields
    :rtype: List[Operation]
    """
    return [
        Operation("3 + 3"),
        Operation("9 / 3"),
        Operation(3, OperationMode.MODULO, 5),
    ]


def main() -> None:
    """
    Encode the sample operations to JSON and print them.
    """
    setup_logging()

    operations = build_samples()
    for operation in operations:
        logger.info(f"🧮 {operation}")

    print(OperationCodec().encode(operations))


if __name__ == "__main__":
    main()
