# SPDX-License-Identifier: MIT


class InvalidArgumentError(ValueError):
    """Raised when a caller passes input that violates a layout contract."""


class TournamentNotFoundError(LookupError):
    pass
