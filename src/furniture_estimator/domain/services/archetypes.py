"""Furniture archetypes as decomposition strategies.

Each furniture type is a DecompositionRule subclass registered with the
archetype registry. The rule is selected once per pass and then used
uniformly: it validates the configuration against what the archetype
supports, emits carcass and interior pieces, and names any hardware the
archetype adds on top of the common rules.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterator, Mapping, TypeVar

from ..exceptions import InvalidSpecError
from ..value_objects import (
    ALL_EDGES,
    Edge,
    FurnitureSpec,
    FurnitureType,
    ItemCategory,
    ItemType,
    MaterialCategory,
    PanelRole,
    PanelSpec,
)
from .interior_plan import InteriorPlan

logger = logging.getLogger(__name__)

R = TypeVar("R", bound="DecompositionRule")

FRONT_EDGE = frozenset({Edge.FRONT})
NO_EDGES: frozenset[Edge] = frozenset()

# Custom parts are sized from the smaller of width and depth
CUSTOM_PART_LENGTH_FACTOR = 0.8
CUSTOM_PART_WIDTH_FACTOR = 0.6


@dataclass(frozen=True)
class Board:
    """Board resolved for one material category, in spec units."""

    label: str
    thickness: float


@dataclass(frozen=True)
class HardwareExtra:
    """Hardware an archetype adds regardless of configuration."""

    key: str
    name: str
    quantity: int


@dataclass(frozen=True)
class DecompositionContext:
    """Everything a rule needs to emit pieces."""

    spec: FurnitureSpec
    plan: InteriorPlan
    boards: Mapping[MaterialCategory, Board]

    def piece(
        self,
        part_name: str,
        role: PanelRole,
        item_type: ItemType,
        item_category: ItemCategory,
        category: MaterialCategory,
        length: float,
        width: float,
        exposed_edges: frozenset[Edge],
    ) -> PanelSpec:
        """Build a single physical piece drawn from ``category``'s board."""
        board = self.boards[category]
        return PanelSpec(
            item_type=item_type,
            item_category=item_category,
            part_name=part_name,
            role=role,
            material_category=category,
            material_type=board.label,
            length=length,
            width=width,
            thickness=board.thickness,
            exposed_edges=exposed_edges,
            description=f"{part_name} {length:g} x {width:g} {board.label}",
        )


class DecompositionRule:
    """Common decomposition for a cabinet-like carcass.

    Subclasses restrict what the archetype supports through class
    attributes and may add archetype-specific hardware.

    Attributes:
        forbidden: Configuration counts that must be zero.
        minimums: Configuration counts with a lower bound.
        hardware_extras: Hardware added to every piece of this archetype.
    """

    furniture_type: ClassVar[FurnitureType]
    forbidden: ClassVar[frozenset[str]] = frozenset()
    minimums: ClassVar[Mapping[str, int]] = {}
    hardware_extras: ClassVar[tuple[HardwareExtra, ...]] = ()

    def validate(self, spec: FurnitureSpec) -> None:
        """Reject configurations the archetype does not support.

        Raises:
            InvalidSpecError: If a forbidden count is non-zero or a
                required minimum is not met.
        """
        config = spec.configuration
        kind = self.furniture_type.value
        for name in sorted(self.forbidden):
            if getattr(config, name):
                raise InvalidSpecError(
                    f"A {kind} does not support {name}",
                    field=f"configuration.{name}",
                )
        for name, minimum in self.minimums.items():
            value = getattr(config, name)
            if value < minimum:
                raise InvalidSpecError(
                    f"A {kind} needs at least {minimum} {name} (got {value})",
                    field=f"configuration.{name}",
                )

    def required_categories(self, spec: FurnitureSpec) -> tuple[MaterialCategory, ...]:
        """Material categories the pieces of ``spec`` draw from."""
        config = spec.configuration
        categories = [MaterialCategory.CARCASS, MaterialCategory.BACK]
        if config.drawers or config.front_leaves:
            categories.append(MaterialCategory.FRONT)
        if config.drawers:
            categories.extend([MaterialCategory.DRAWER_BOX, MaterialCategory.DRAWER_BOTTOM])
        return tuple(categories)

    def pieces(self, ctx: DecompositionContext) -> Iterator[PanelSpec]:
        """Yield every physical piece, carcass first."""
        yield from self.carcass_pieces(ctx)
        yield from self.shelf_pieces(ctx)
        yield from self.drawer_pieces(ctx)
        yield from self.leaf_pieces(ctx)
        yield from self.custom_pieces(ctx)

    def carcass_pieces(self, ctx: DecompositionContext) -> Iterator[PanelSpec]:
        plan = ctx.plan
        main = (ItemType.PANEL, ItemCategory.MAIN_STRUCTURE, MaterialCategory.CARCASS)
        for _ in range(2):
            yield ctx.piece(
                "Side Panel", PanelRole.SIDE, *main, plan.height, plan.depth, FRONT_EDGE
            )
        yield ctx.piece(
            "Top Panel", PanelRole.TOP, *main, plan.interior_width, plan.depth, FRONT_EDGE
        )
        yield ctx.piece(
            "Bottom Panel", PanelRole.BOTTOM, *main, plan.interior_width, plan.depth, FRONT_EDGE
        )
        yield ctx.piece(
            "Back Panel",
            PanelRole.BACK,
            ItemType.PANEL,
            ItemCategory.MAIN_STRUCTURE,
            MaterialCategory.BACK,
            plan.interior_height,
            plan.interior_width,
            NO_EDGES,
        )

    def shelf_pieces(self, ctx: DecompositionContext) -> Iterator[PanelSpec]:
        plan = ctx.plan
        for _ in plan.shelf_levels:
            yield ctx.piece(
                "Shelf",
                PanelRole.SHELF,
                ItemType.SHELF,
                ItemCategory.INTERNAL,
                MaterialCategory.CARCASS,
                plan.interior_width,
                plan.shelf_depth,
                FRONT_EDGE,
            )

    def drawer_pieces(self, ctx: DecompositionContext) -> Iterator[PanelSpec]:
        plan = ctx.plan
        if not plan.drawer_bands:
            return
        box_t = ctx.boards[MaterialCategory.DRAWER_BOX].thickness
        box = (ItemType.DRAWER_COMPONENT, ItemCategory.INTERNAL)
        for _ in plan.drawer_bands:
            yield ctx.piece(
                "Drawer Front",
                PanelRole.DRAWER_FRONT,
                ItemType.DRAWER_COMPONENT,
                ItemCategory.FRONT,
                MaterialCategory.FRONT,
                plan.width,
                plan.drawer_band,
                ALL_EDGES,
            )
            for _ in range(2):
                yield ctx.piece(
                    "Drawer Side",
                    PanelRole.DRAWER_SIDE,
                    *box,
                    MaterialCategory.DRAWER_BOX,
                    plan.drawer_box_depth,
                    plan.drawer_box_height,
                    FRONT_EDGE,
                )
            yield ctx.piece(
                "Drawer Back",
                PanelRole.DRAWER_BACK,
                *box,
                MaterialCategory.DRAWER_BOX,
                plan.drawer_box_width - 2 * box_t,
                plan.drawer_box_height,
                FRONT_EDGE,
            )
            yield ctx.piece(
                "Drawer Bottom",
                PanelRole.DRAWER_BOTTOM,
                *box,
                MaterialCategory.DRAWER_BOTTOM,
                plan.drawer_box_width,
                plan.drawer_box_depth,
                NO_EDGES,
            )

    def leaf_pieces(self, ctx: DecompositionContext) -> Iterator[PanelSpec]:
        plan = ctx.plan
        for i, leaf in enumerate(plan.leaves):
            is_door = i < plan.door_count
            yield ctx.piece(
                "Door" if is_door else "Shutter",
                PanelRole.DOOR if is_door else PanelRole.SHUTTER,
                ItemType.DOOR if is_door else ItemType.SHUTTER,
                ItemCategory.FRONT,
                MaterialCategory.FRONT,
                plan.leaf_height,
                leaf.width,
                ALL_EDGES,
            )

    def custom_pieces(self, ctx: DecompositionContext) -> Iterator[PanelSpec]:
        plan = ctx.plan
        base = min(plan.width, plan.depth)
        for part in ctx.spec.configuration.custom_parts:
            for _ in range(part.quantity):
                yield ctx.piece(
                    part.name,
                    PanelRole.CUSTOM,
                    ItemType.CUSTOM_PART,
                    ItemCategory.INTERNAL,
                    MaterialCategory.CARCASS,
                    base * CUSTOM_PART_LENGTH_FACTOR,
                    base * CUSTOM_PART_WIDTH_FACTOR,
                    FRONT_EDGE,
                )


class ArchetypeRegistry:
    """Singleton registry mapping furniture types to decomposition rules.

    Example:
        @archetype_registry.register(FurnitureType.WARDROBE)
        class WardrobeRule(DecompositionRule):
            ...

        rule = archetype_registry.get(FurnitureType.WARDROBE)
    """

    _instance: ArchetypeRegistry | None = None
    _rules: dict[FurnitureType, type[DecompositionRule]]

    def __new__(cls) -> ArchetypeRegistry:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._rules = {}
        return cls._instance

    def register(self, furniture_type: FurnitureType) -> Callable[[type[R]], type[R]]:
        """Decorator to register a rule class for ``furniture_type``.

        Raises:
            ValueError: If the type already has a rule.
        """

        def decorator(cls: type[R]) -> type[R]:
            if furniture_type in self._rules:
                raise ValueError(f"Archetype '{furniture_type.value}' already registered")
            cls.furniture_type = furniture_type
            self._rules[furniture_type] = cls
            return cls

        return decorator

    def get(self, furniture_type: FurnitureType) -> DecompositionRule:
        """Return a rule instance for ``furniture_type``.

        Raises:
            InvalidSpecError: If no rule is registered for the type.
        """
        try:
            rule_cls = self._rules[furniture_type]
        except KeyError:
            raise InvalidSpecError(
                f"No decomposition rule for furniture type '{furniture_type}'",
                field="furnitureType",
            ) from None
        return rule_cls()

    def list(self) -> list[str]:
        """Registered furniture type values, sorted."""
        return sorted(t.value for t in self._rules)


archetype_registry = ArchetypeRegistry()


@archetype_registry.register(FurnitureType.WARDROBE)
class WardrobeRule(DecompositionRule):
    """Full-height wardrobe. Supports every feature."""


@archetype_registry.register(FurnitureType.CABINET)
class CabinetRule(DecompositionRule):
    """General cabinet. Supports every feature."""


@archetype_registry.register(FurnitureType.STORAGE_UNIT)
class StorageUnitRule(DecompositionRule):
    """Storage unit: shelves, drawers and doors, no shutters."""

    forbidden = frozenset({"shutters"})


@archetype_registry.register(FurnitureType.BOOKSHELF)
class BookshelfRule(DecompositionRule):
    """Bookshelf: shelves, drawers and doors, no shutters."""

    forbidden = frozenset({"shutters"})


@archetype_registry.register(FurnitureType.TV_UNIT)
class TvUnitRule(DecompositionRule):
    """Wall-mounted TV unit with at least one shutter and no drawers."""

    forbidden = frozenset({"drawers"})
    minimums = {"shutters": 1}
    hardware_extras = (HardwareExtra("wall_bracket", "Wall Bracket", 4),)


@archetype_registry.register(FurnitureType.SHOE_RACK)
class ShoeRackRule(DecompositionRule):
    """Open shoe rack with at least three shelves."""

    forbidden = frozenset({"drawers", "shutters"})
    minimums = {"shelves": 3}
