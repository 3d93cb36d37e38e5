"""
Activation schedules of builtin pricing.

The `pricing` of a builtin is either a single variant, active for as long as
the builtin itself is, or a list of variants each tagged with the block at
which it becomes active.
"""

from typing import Annotated, Any, Iterator, List, Tuple, Union

from pydantic import Discriminator, StrictStr, Tag

from ethereum_chainspec_base_types import ChainSpecBaseModel, ChainSpecRootModel, Uint

from .exceptions import PRICING_SHAPE_ERROR
from .pricing import PricingVariant, PricingVariantModel


class PricingAt(ChainSpecBaseModel):
    """Pricing variant together with the block at which it is activated."""

    info: StrictStr | None = None
    """Free text describing the activation, e.g. the upgrade that introduced it."""

    price: PricingVariant
    activate_at: Uint


class SinglePricing(ChainSpecRootModel[PricingVariant]):
    """A single pricing variant, used for the whole lifetime of the builtin."""

    root: PricingVariant

    @property
    def variant(self) -> PricingVariantModel:
        """Return the pricing variant."""
        return self.root


class MultiPricing(ChainSpecRootModel[Tuple[PricingAt, ...]]):
    """
    Pricing schedule: a list of pricing variants keyed by activation block.

    Entries are kept in the order they were written. They are neither sorted nor
    deduplicated, and overlapping or unordered activation blocks are accepted as is;
    picking the entry that applies at a given block is left to the consumer.
    """

    root: Tuple[PricingAt, ...]

    def __iter__(self) -> Iterator[PricingAt]:  # type: ignore [override]
        """Iterate over the schedule entries."""
        return iter(self.root)

    def __len__(self) -> int:
        """Return the number of schedule entries."""
        return len(self.root)

    def __getitem__(self, index: int) -> PricingAt:
        """Return the schedule entry at the given index."""
        return self.root[index]

    def activation_heights(self) -> List[Uint]:
        """Return the activation block of each entry, in schedule order."""
        return [entry.activate_at for entry in self.root]


def pricing_shape(v: Any) -> str | None:
    """
    Discriminator function that resolves the shape of a pricing value.

    Objects are single pricing variants and lists are pricing schedules.
    """
    if isinstance(v, (dict, SinglePricing, PricingVariantModel)):
        return "single"
    if isinstance(v, (list, tuple, MultiPricing)):
        return "multi"
    return None


Pricing = Annotated[
    Union[
        Annotated[SinglePricing, Tag("single")],
        Annotated[MultiPricing, Tag("multi")],
    ],
    Discriminator(
        pricing_shape,
        custom_error_type=PRICING_SHAPE_ERROR,
        custom_error_message=(
            "Pricing must be an object (single pricing variant) "
            "or a list (pricing schedule)"
        ),
    ),
]
"""Pricing of a builtin: a `SinglePricing` or a `MultiPricing` schedule."""
