"""Option forms: parse raw user values into typed job requests."""

from mediaconv.forms.compress import CompressForm
from mediaconv.forms.convert import ConvertForm
from mediaconv.forms.request import FORMS, build_job_request
from mediaconv.forms.rescale import RescaleForm
from mediaconv.forms.speed import SpeedForm

__all__ = [
    "FORMS",
    "CompressForm",
    "ConvertForm",
    "RescaleForm",
    "SpeedForm",
    "build_job_request",
]
