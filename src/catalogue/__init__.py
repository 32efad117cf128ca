"""Registry of runnable examples.

Each demo is a self-contained module exposing `main()`; it prints its trace
and knows nothing about this registry. Entries are listed in catalogue
order, which is also the order `run-all` uses.
"""

from __future__ import annotations

from core.domain.category import Category
from core.domain.models import DemoInfo


def _demo(category: Category, name: str, title: str, summary: str) -> DemoInfo:
    return DemoInfo(
        slug=f"{category.value}/{name}",
        title=title,
        category=category,
        summary=summary,
        module=f"catalogue.{category.value}.{name.replace('-', '_')}",
    )


_C = Category.CREATIONAL
_S = Category.STRUCTURAL
_B = Category.BEHAVIORAL
_P = Category.PRINCIPLES
_D = Category.SOLID
_O = Category.OOP

DEMOS: tuple[DemoInfo, ...] = (
    _demo(_C, "abstract-factory", "Abstract Factory",
          "Modern and victorian factories create chairs and sofas that match each other."),
    _demo(_C, "builder", "Builder",
          "A director drives car and manual builders through the same steps."),
    _demo(_C, "fluent-builder", "Fluent Builder",
          "Chainable builder calls ending in build()."),
    _demo(_C, "house-builder", "House Builder",
          "A director sets roof, floor and base on a concrete house builder."),
    _demo(_C, "factory-method", "Factory Method",
          "Creators defer the choice of product to a subclass hook."),
    _demo(_C, "pet-factory", "Pet Factory",
          "A simple factory maps a name to a pet; unknown names are rejected."),
    _demo(_C, "prototype", "Prototype",
          "Shapes clone themselves; copies are equal but not identical."),
    _demo(_C, "singleton", "Singleton",
          "A lazily created database connection guarded by a lock."),
    _demo(_C, "admin-singleton", "Admin Singleton",
          "Double-checked locking admin account with a static credential check."),
    _demo(_S, "adapter", "Adapter",
          "Square pegs fit round holes through an adapter that reports a radius."),
    _demo(_S, "bridge", "Bridge",
          "Remote controls drive TVs and radios through one device interface."),
    _demo(_S, "composite", "Composite",
          "A compound graphic forwards move and draw to its children."),
    _demo(_S, "decorator", "Decorator",
          "Compression and encryption layers wrap a file data source."),
    _demo(_S, "shape-decorator", "Shape Decorator",
          "A red border decorator draws the shape it wraps."),
    _demo(_S, "facade", "Facade",
          "A video converter hides codec, bitrate and audio mixing classes."),
    _demo(_S, "shape-facade", "Shape Facade",
          "One maker object draws circles, rectangles and squares."),
    _demo(_S, "flyweight", "Flyweight",
          "Trees share intrinsic tree types created once per combination."),
    _demo(_S, "proxy", "Proxy",
          "A caching proxy sits in front of a slow video service."),
    _demo(_B, "chain-of-responsibility", "Chain of Responsibility",
          "Help requests bubble up the container chain until someone answers."),
    _demo(_B, "command", "Command",
          "Copy, cut and paste commands with an undo history."),
    _demo(_B, "text-file-command", "Text File Command",
          "An executor records open and save operations on a text file."),
    _demo(_B, "iterator", "Iterator",
          "A lazy iterator over a social network's friends and coworkers."),
    _demo(_B, "mediator", "Mediator",
          "An authentication dialog coordinates its checkbox and buttons."),
    _demo(_B, "memento", "Memento",
          "An editor snapshot is saved and restored by a command."),
    _demo(_B, "observer", "Observer",
          "An event manager notifies file event subscribers."),
    _demo(_B, "number-observer", "Number Observer",
          "Binary, octal and hex observers follow one subject."),
    _demo(_B, "state", "State",
          "An audio player whose buttons depend on the locked, ready or playing state."),
    _demo(_B, "context-state", "Context State",
          "Start and end states register themselves on a context."),
    _demo(_B, "strategy", "Strategy",
          "A context delegates arithmetic to the selected strategy."),
    _demo(_B, "template-method", "Template Method",
          "A game AI turn skeleton with orc and monster steps."),
    _demo(_B, "visitor", "Visitor",
          "An XML export visitor double-dispatches over shapes."),
    _demo(_P, "encapsulate-what-varies", "Encapsulate What Varies",
          "Per-country tax rules isolated in a calculator."),
    _demo(_P, "favor-composition", "Favor Composition Over Inheritance",
          "A transport composed of an engine and a driver."),
    _demo(_P, "program-to-interface", "Program to an Interface",
          "Companies work with employees only through a shared interface."),
    _demo(_D, "single-responsibility", "Single Responsibility",
          "Timesheet printing moved out of the employee record."),
    _demo(_D, "open-closed", "Open/Closed",
          "Shipping methods plug into an order without modifying it."),
    _demo(_D, "liskov-substitution", "Liskov Substitution",
          "Only writable documents are asked to save."),
    _demo(_D, "interface-segregation", "Interface Segregation",
          "Cloud providers implement only the capabilities they offer."),
    _demo(_D, "dependency-inversion", "Dependency Inversion",
          "A budget report depends on a database interface."),
    _demo(_O, "abstraction", "Abstraction",
          "Each airplane model keeps only what its context needs."),
    _demo(_O, "encapsulation", "Encapsulation",
          "An airport accepts anything that can fly."),
    _demo(_O, "inheritance", "Inheritance",
          "A cat overrides the animal's walking and breathing."),
    _demo(_O, "polymorphism", "Polymorphism",
          "Overridden sounds and an eat method with an optional quantity."),
    _demo(_O, "relations", "Relations",
          "Dependency, association, aggregation and composition between classes."),
    _demo(_O, "animal-behaviour", "Animal Behaviour",
          "Flying ability composed into animals and swapped at runtime."),
)

__all__ = ["DEMOS"]
