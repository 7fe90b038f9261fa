"""
The license registry: the known SPDX license and exception identifiers, their
metadata, and the aliases under which licenses are commonly declared.

A registry is an immutable snapshot. :func:`default_registry` returns the one
built from the SPDX license list bundled with this package; callers that work
against another version of the list construct their own
:class:`LicenseRegistry` and pass it explicitly.
"""

from __future__ import annotations

import functools
import logging
import re
import types
from typing import Iterable, Mapping, Sequence

import attr

from . import _aliases, _spdx

__all__ = [
    "NOASSERTION",
    "NONE",
    "ExceptionRecord",
    "LicenseRecord",
    "LicenseRegistry",
    "default_registry",
    "sanitize",
]

logger = logging.getLogger(__name__)

NONE = "NONE"
NOASSERTION = "NOASSERTION"

_disallowed_characters = re.compile(r"[^a-z0-9.\-]")


def sanitize(text: str) -> str:
    """
    Turn free-form text into something usable as the ``idstring`` of a
    ``LicenseRef-``: lower case, with every other character replaced by ``-``.

    >>> sanitize("Foo Bar/1.0")
    'foo-bar-1.0'
    """
    return _disallowed_characters.sub("-", text.lower())


@attr.s(frozen=True, slots=True)
class LicenseRecord:
    id: str = attr.ib()
    name: str = attr.ib(default="")
    deprecated: bool = attr.ib(default=False)
    or_later: bool = attr.ib(default=False)


@attr.s(frozen=True, slots=True)
class ExceptionRecord:
    id: str = attr.ib()
    deprecated: bool = attr.ib(default=False)


class LicenseRegistry:
    """
    A read-only table of licenses and license exceptions.

    All lookups are case-insensitive.

    :param licenses: The known licenses. Either records or mappings with the
        keys of :class:`LicenseRecord`, like the generated SPDX data.
    :param exceptions: The known license exceptions, likewise.
    :param aliases: Free-form names mapped to one or more canonical license
        ids, e.g. ``{"apache2": ("Apache-2.0",)}``.
    :param version: The version of the license list the data comes from.
    """

    __slots__ = ("_aliases", "_exceptions", "_licenses", "_version")

    def __init__(
        self,
        licenses: Iterable[LicenseRecord | Mapping[str, object]],
        exceptions: Iterable[ExceptionRecord | Mapping[str, object]] = (),
        aliases: Mapping[str, Sequence[str]] | None = None,
        *,
        version: str = "",
    ) -> None:
        license_table = {}
        for record in licenses:
            if not isinstance(record, LicenseRecord):
                record = LicenseRecord(**record)  # type: ignore[arg-type]
            license_table[record.id.lower()] = record

        exception_table = {}
        for record in exceptions:
            if not isinstance(record, ExceptionRecord):
                record = ExceptionRecord(**record)  # type: ignore[arg-type]
            exception_table[record.id.lower()] = record

        alias_table = {}
        for alias, targets in (aliases or {}).items():
            canonical = []
            for target in targets:
                if target.lower() not in license_table:
                    raise ValueError(
                        f"alias {alias!r} refers to unknown license {target!r}"
                    )
                canonical.append(license_table[target.lower()].id)
            if not canonical:
                raise ValueError(f"alias {alias!r} does not refer to any license")
            alias_table[alias.lower()] = tuple(canonical)

        self._licenses = types.MappingProxyType(license_table)
        self._exceptions = types.MappingProxyType(exception_table)
        self._aliases = types.MappingProxyType(alias_table)
        self._version = version

        logger.debug(
            "License registry %r: %d licenses, %d exceptions, %d aliases",
            version,
            len(license_table),
            len(exception_table),
            len(alias_table),
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(version={self._version!r})>"

    def __len__(self) -> int:
        return len(self._licenses)

    def __contains__(self, license_id: object) -> bool:
        return isinstance(license_id, str) and license_id.lower() in self._licenses

    @property
    def version(self) -> str:
        return self._version

    @property
    def licenses(self) -> Mapping[str, LicenseRecord]:
        """The license records, keyed by lower-cased id."""
        return self._licenses

    @property
    def exceptions(self) -> Mapping[str, ExceptionRecord]:
        """The exception records, keyed by lower-cased id."""
        return self._exceptions

    @property
    def aliases(self) -> Mapping[str, tuple[str, ...]]:
        """The canonical license ids, keyed by lower-cased alias."""
        return self._aliases

    def license(self, license_id: str) -> LicenseRecord | None:
        return self._licenses.get(license_id.lower())

    def exception(self, exception_id: str) -> ExceptionRecord | None:
        return self._exceptions.get(exception_id.lower())

    def resolve(self, text: str) -> tuple[str, ...]:
        """
        Map free-form text to the canonical license ids it stands for.

        An exact (case-insensitive) license id wins over an alias. An empty
        tuple means the text is not known to this registry.
        """
        key = text.lower()
        record = self._licenses.get(key)
        if record is not None:
            return (record.id,)
        return self._aliases.get(key, ())


@functools.lru_cache(maxsize=None)
def default_registry() -> LicenseRegistry:
    """The registry built from the SPDX license list bundled with this package."""
    return LicenseRegistry(
        _spdx.LICENSES.values(),
        _spdx.EXCEPTIONS.values(),
        _aliases.ALIASES,
        version=_spdx.VERSION,
    )
