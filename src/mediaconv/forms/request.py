"""Build validated job requests from raw option values."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from mediaconv.domain.enums import MediaKind, OperationType
from mediaconv.domain.models import JobRequest
from mediaconv.errors import InvalidInputError, UnsupportedOperationError
from mediaconv.forms.base import FormModel, validation_error_to_invalid_input
from mediaconv.forms.compress import CompressForm
from mediaconv.forms.convert import ConvertForm
from mediaconv.forms.rescale import RescaleForm
from mediaconv.forms.speed import SpeedForm
from mediaconv.media.detection import OPERATION_KINDS, detect_media_kind

logger = logging.getLogger(__name__)

FORMS: dict[OperationType, type[FormModel]] = {
    OperationType.RESCALE: RescaleForm,
    OperationType.SPEED: SpeedForm,
    OperationType.CONVERT: ConvertForm,
    OperationType.COMPRESS: CompressForm,
}


def build_job_request(
    operation: OperationType | str,
    input_path: Path | str,
    values: Mapping[str, Any],
    allowed_kinds: Iterable[MediaKind] | None = None,
) -> JobRequest:
    """Validate raw values and build a JobRequest.

    Args:
        operation: Operation to perform.
        input_path: Path to the input file.
        values: Raw option values keyed by form field name.
        allowed_kinds: Further restrict the media kinds accepted, for
            front ends dedicated to a single kind.

    Returns:
        A request ready for compilation.

    Raises:
        InvalidInputError: If the file is missing, its extension is not
            recognized, or an option value is malformed.
        UnsupportedOperationError: If the operation cannot handle the
            file's media kind.
    """
    try:
        operation_type = OperationType(operation)
    except ValueError:
        raise UnsupportedOperationError(str(operation)) from None

    path = Path(input_path).expanduser()
    if not path.is_file():
        raise InvalidInputError(f"Input file not found: {path}", field="input_path")
    path = path.resolve()

    media_kind = detect_media_kind(path)
    if media_kind is None:
        raise InvalidInputError(
            f"Unsupported file type: {path.suffix or path.name}", field="input_path"
        )

    supported = OPERATION_KINDS[operation_type]
    if allowed_kinds is not None:
        supported = supported & frozenset(allowed_kinds)
    if media_kind not in supported:
        raise UnsupportedOperationError(operation_type.value, media_kind.value)

    form_cls = FORMS[operation_type]
    try:
        form = form_cls.model_validate(dict(values))
    except ValidationError as e:
        raise validation_error_to_invalid_input(e) from e

    try:
        options = form.to_options(media_kind)
    except ValueError as e:
        raise InvalidInputError(str(e)) from e

    logger.debug(
        "Built %s request for %s (%s)", operation_type.value, path, media_kind.value
    )
    return JobRequest(input_path=path, media_kind=media_kind, operation=options)
