"""The five SOLID principles with their prose and snippet pairs."""

from typing import List

from solid_principles.domain.principle import Principle, PrincipleId, Snippet, Variant
from solid_principles.infrastructure.logging.logger import get_logger

from .registry import PrincipleRegistry

SNIPPETS_PACKAGE = "solid_principles.snippets"

logger = get_logger(__name__)


def _snippet(principle_id: PrincipleId, package: str, variant: Variant, **kwargs) -> Snippet:
    return Snippet(
        principle_id=principle_id,
        variant=variant,
        module=f"{SNIPPETS_PACKAGE}.{package}.{variant.value}",
        **kwargs,
    )


SINGLE_RESPONSIBILITY = Principle(
    id=PrincipleId.SRP,
    name="Single Responsibility Principle",
    slug="single_responsibility",
    summary="A class should have one, and only one, reason to change.",
    bad_prose=(
        "`Salary` calculates the salary, prints the paycheck and saves the data. "
        "A new payroll rule, a new paycheck layout and a new database all force "
        "changes to the same class."
    ),
    good_prose=(
        "Each responsibility moves into its own class: `SalaryCalculate` calculates, "
        "`SalaryPaycheck` prints and `SalaryPersistence` saves. Each class now has a "
        "single reason to change."
    ),
    bad=_snippet(
        PrincipleId.SRP, "single_responsibility", Variant.BAD,
        classes=["Salary"],
    ),
    good=_snippet(
        PrincipleId.SRP, "single_responsibility", Variant.GOOD,
        classes=["SalaryCalculate", "SalaryPaycheck", "SalaryPersistence"],
    ),
)

OPEN_CLOSED = Principle(
    id=PrincipleId.OCP,
    name="Open/Closed Principle",
    slug="open_closed",
    summary="Software entities should be open for extension but closed for modification.",
    bad_prose=(
        "`NotifyManager` switches on `selected_notify_channel` and calls a "
        "channel-specific method on `Employee`, raising `ValueError` for anything it "
        "does not know. Adding a channel means editing both classes."
    ),
    good_prose=(
        "Every channel implements the `Notifier` interface and the `Employee` is built "
        "with the notifier it needs. `NotifyManager` only calls `send_notification`, so "
        "a new channel is a new `Notifier` subclass and no existing code changes."
    ),
    bad=_snippet(
        PrincipleId.OCP, "open_closed", Variant.BAD,
        classes=["Employee", "NotifyManager"],
        raises=["ValueError"],
    ),
    good=_snippet(
        PrincipleId.OCP, "open_closed", Variant.GOOD,
        classes=["Notifier", "EmailNotifier", "SMSNotifier", "Employee", "NotifyManager"],
        abstractions=["Notifier"],
    ),
)

LISKOV_SUBSTITUTION = Principle(
    id=PrincipleId.LSP,
    name="Liskov Substitution Principle",
    slug="liskov_substitution",
    summary="Objects of a subclass must be usable wherever the base class is expected.",
    bad_prose=(
        "`Square` inherits from `Rectangle` and overrides both setters to keep its "
        "sides equal. Code that sets a rectangle's width and height and expects "
        "`width * height` gets a different area once it is handed a `Square`."
    ),
    good_prose=(
        "`Rectangle` and `Square` are siblings under a `Shape` abstraction that only "
        "promises an `area`. Neither can break an expectation the other sets."
    ),
    bad=_snippet(
        PrincipleId.LSP, "liskov_substitution", Variant.BAD,
        classes=["Rectangle", "Square"],
    ),
    good=_snippet(
        PrincipleId.LSP, "liskov_substitution", Variant.GOOD,
        classes=["Shape", "Rectangle", "Square"],
        abstractions=["Shape"],
    ),
)

INTERFACE_SEGREGATION = Principle(
    id=PrincipleId.ISP,
    name="Interface Segregation Principle",
    slug="interface_segregation",
    summary="Clients should not be forced to depend on methods they do not use.",
    bad_prose=(
        "The `Notifier` interface bundles `notify` with `attach_file`. `SMSNotifier` "
        "cannot attach files, so it is left raising `NotImplementedError` for an "
        "operation its interface still advertises."
    ),
    good_prose=(
        "`Notifier` and `Attacher` are split. `EmailNotifier` implements both, while "
        "`SMSNotifier` implements only what it supports."
    ),
    bad=_snippet(
        PrincipleId.ISP, "interface_segregation", Variant.BAD,
        classes=["Notifier", "EmailNotifier", "SMSNotifier"],
        abstractions=["Notifier"],
        raises=["NotImplementedError"],
    ),
    good=_snippet(
        PrincipleId.ISP, "interface_segregation", Variant.GOOD,
        classes=["Notifier", "Attacher", "EmailNotifier", "SMSNotifier"],
        abstractions=["Notifier", "Attacher"],
    ),
)

DEPENDENCY_INVERSION = Principle(
    id=PrincipleId.DIP,
    name="Dependency Inversion Principle",
    slug="dependency_inversion",
    summary="Depend on abstractions, not on concretions.",
    bad_prose=(
        "`AppInit` constructs a concrete `DBConnection` itself. The high-level start-up "
        "code is welded to one database and cannot be tested without it."
    ),
    good_prose=(
        "`DBConnection` becomes an abstraction that `MySQLConnection` implements, and "
        "`AppInit` receives whichever connection it is given."
    ),
    bad=_snippet(
        PrincipleId.DIP, "dependency_inversion", Variant.BAD,
        classes=["DBConnection", "AppInit"],
    ),
    good=_snippet(
        PrincipleId.DIP, "dependency_inversion", Variant.GOOD,
        classes=["DBConnection", "MySQLConnection", "AppInit"],
        abstractions=["DBConnection"],
    ),
)

DEFAULT_PRINCIPLES: List[Principle] = [
    SINGLE_RESPONSIBILITY,
    OPEN_CLOSED,
    LISKOV_SUBSTITUTION,
    INTERFACE_SEGREGATION,
    DEPENDENCY_INVERSION,
]


def register_default_principles(registry: PrincipleRegistry) -> PrincipleRegistry:
    """Register the five principles in S-O-L-I-D order, skipping any already present."""
    for principle in DEFAULT_PRINCIPLES:
        if registry.is_registered(principle.id):
            logger.debug("Principle already registered", principle=principle.id.value)
            continue
        registry.register_principle(principle)
    return registry
