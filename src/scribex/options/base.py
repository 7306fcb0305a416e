#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for component options.

Every configurable scribex component (sanitizer, markup importer, Markdown
renderer and parser, input rule engine) takes a frozen options dataclass
derived from the classes below.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Self

from scribex.exceptions import InvalidOptionsError


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseOptions(CloneFrozenMixin):
    """Base class for all component options.

    Notes
    -----
    Subclasses define component-specific settings as frozen dataclass fields
    carrying ``help`` and ``importance`` metadata, and validate value ranges in
    ``__post_init__``.

    """

    def __post_init__(self) -> None:
        """Validate numeric ranges for options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        pass


def validate_options_type(options: BaseOptions | None, expected_type: type, component_name: str) -> None:
    """Validate that options are of the correct type for a component.

    Parameters
    ----------
    options : BaseOptions or None
        The options object to validate
    expected_type : type
        The expected options class type
    component_name : str
        Name of the component (for error messages)

    Raises
    ------
    InvalidOptionsError
        If options are not None and not an instance of expected_type

    """
    if options is not None and not isinstance(options, expected_type):
        raise InvalidOptionsError(
            component_name=component_name,
            expected_type=expected_type,
            received_type=type(options),
        )
