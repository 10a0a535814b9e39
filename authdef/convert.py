"""
Conversion entry points between the legacy and the modern definitions.

Copyright (c) 2025 Gimel Foundation and the persons identified as the document authors.
All rights reserved. This file is subject to the Gimel Foundation's Legal Provisions Relating to GiFo Documents.
See http://GimelFoundation.com or https://github.com/Gimel-Foundation for details.
Code Components extracted from GiFo-RfC 0111 must include this license text and are provided without warranty.
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional, Union

from .apidef.types import APIDefinition
from .errors import ConversionError
from .oas.authentication import Authentication

logger = logging.getLogger(__name__)


class Direction(str, Enum):
    """Direction of a document conversion."""
    TO_OAS = "to_oas"
    TO_LEGACY = "to_legacy"


def to_oas(api: APIDefinition) -> Authentication:
    """Build a modern authentication section from a legacy definition."""
    auth = Authentication()
    auth.fill(api)
    return auth


def to_legacy(auth: Authentication, api: Optional[APIDefinition] = None) -> APIDefinition:
    """
    Write auth into api, or into a fresh definition when api is None.
    Returns the definition written to.
    """
    if api is None:
        api = APIDefinition()

    auth.extract_to(api)
    return api


def convert_document(document: Dict[str, Any], direction: Union[Direction, str]) -> Dict[str, Any]:
    """
    Convert a plain dictionary document.

    TO_OAS reads a legacy definition and returns the modern authentication
    section; TO_LEGACY does the reverse.
    """
    try:
        direction = Direction(direction)
    except ValueError:
        raise ConversionError(direction)

    if direction is Direction.TO_OAS:
        auth = to_oas(APIDefinition.from_dict(document))
        logger.debug(f"Converted legacy document to modern, modes: {auth.modes()}")
        return auth.to_dict()

    auth = Authentication.from_dict(document)
    api = to_legacy(auth)
    logger.debug(f"Converted modern document to legacy, modes: {auth.modes()}")
    return api.to_dict()
