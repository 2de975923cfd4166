# SPDX-License-Identifier: MIT


class SymeraError(Exception):
    """Base exception for symera errors."""

    pass


class SnapshotError(SymeraError):
    """A data snapshot file could not be read as a list of records."""

    pass
