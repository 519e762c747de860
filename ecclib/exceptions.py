#!/usr/bin/env python3

# Copyright (C) The ecclib developers
#
# This file is part of ecclib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecclib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Exception classes.

The three base classes are only meant to discriminate between Exceptions
being raised by ecclib from those raised by other codebase:
users are usually better off just dealing with the regular
ValueError, TypeError, and RuntimeError from which they are derived.

The remaining classes name the specific failure,
so that it can be handled without parsing error messages.
"""

from typing import Any


class ECClibValueError(ValueError):
    pass


class ECClibTypeError(TypeError):
    pass


class ECClibRuntimeError(RuntimeError):
    pass


class InvalidPrimeError(ECClibValueError):
    "Field modulus not greater than one."

    def __init__(self, prime: int) -> None:
        super().__init__(f"prime must be > 1, got {prime}")
        self.prime = prime


class DifferentFieldsError(ECClibValueError):
    "Arithmetic between elements of different fields."

    def __init__(self, prime1: int, prime2: int) -> None:
        super().__init__(f"elements must be in the same field: {prime1} vs {prime2}")


class NotOnCurveError(ECClibValueError):
    "Coordinates not satisfying the curve equation."

    def __init__(self, x: Any, y: Any) -> None:
        super().__init__(f"point ({x}, {y}) is not on the curve")
        self.x = x
        self.y = y


class DifferentCurvesError(ECClibValueError):
    def __init__(self) -> None:
        super().__init__("points not on the same curve")


class InvalidModulusError(ECClibValueError):
    pass


class InvalidPrivateKeyError(ECClibValueError):
    pass


class InvalidHashError(ECClibValueError):
    pass


class InvalidNonceError(ECClibRuntimeError):
    pass


class InvalidRError(ECClibRuntimeError):
    pass
