import contextlib

with contextlib.suppress(Exception):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package

    from .app.config import BEARTYPE_ALL_ENV, BEARTYPE_THIS_PACKAGE_ENV
    if os.environ.get(BEARTYPE_THIS_PACKAGE_ENV, "0") == "1":
        beartype_this_package()
    if os.environ.get(BEARTYPE_ALL_ENV, "0") == "1":
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))
from .functional_types import (
    Error,
    Loading,
    Outcome,
    Success,
    UnwrapError,
    error,
    loading,
    success,
)

__all__: list[str] = [
    "Error",
    "Loading",
    "Outcome",
    "Success",
    "UnwrapError",
    "error",
    "loading",
    "success",
]
