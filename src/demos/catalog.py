"""
Pattern Catalog - the 15 built-in demos and their metadata.

Order matters: it is the console menu numbering and the "run all" sequence.
"""

from typing import List

from src.core.registry import PatternCategory, PatternEntry

from . import (
    adapter,
    builder,
    chain,
    command,
    decorator,
    facade,
    factory,
    iterator,
    observer,
    proxy,
    singleton,
    state,
    strategy,
    template,
    visitor,
)


def _entry(module, pattern_id: str, name: str, category: PatternCategory, description: str) -> PatternEntry:
    return PatternEntry(
        id=pattern_id,
        name=name,
        category=category,
        description=description,
        before=module.before,
        after=module.after,
    )


PATTERN_CATALOG: List[PatternEntry] = [
    _entry(singleton, "singleton", "Singleton", PatternCategory.CREATIONAL,
           "Ensures a class has only one instance"),
    _entry(factory, "factory", "Factory Method", PatternCategory.CREATIONAL,
           "Delegates object creation to factories"),
    _entry(strategy, "strategy", "Strategy", PatternCategory.BEHAVIORAL,
           "Encapsulates interchangeable algorithms"),
    _entry(observer, "observer", "Observer", PatternCategory.BEHAVIORAL,
           "Notifies dependents of state changes"),
    _entry(decorator, "decorator", "Decorator", PatternCategory.STRUCTURAL,
           "Adds responsibilities dynamically"),
    _entry(adapter, "adapter", "Adapter", PatternCategory.STRUCTURAL,
           "Converts one interface to another"),
    _entry(template, "template", "Template Method", PatternCategory.BEHAVIORAL,
           "Defines algorithm skeleton"),
    _entry(command, "command", "Command", PatternCategory.BEHAVIORAL,
           "Encapsulates requests as objects"),
    _entry(proxy, "proxy", "Proxy", PatternCategory.STRUCTURAL,
           "Controls access to another object"),
    _entry(iterator, "iterator", "Iterator", PatternCategory.BEHAVIORAL,
           "Accesses elements sequentially"),
    _entry(builder, "builder", "Builder", PatternCategory.CREATIONAL,
           "Constructs complex objects step-by-step"),
    _entry(facade, "facade", "Facade", PatternCategory.STRUCTURAL,
           "Simplifies complex subsystems"),
    _entry(state, "state", "State", PatternCategory.BEHAVIORAL,
           "Changes behavior based on internal state"),
    _entry(chain, "chain", "Chain of Responsibility", PatternCategory.BEHAVIORAL,
           "Passes requests along handler chain"),
    _entry(visitor, "visitor", "Visitor", PatternCategory.BEHAVIORAL,
           "Adds operations without modifying objects"),
]
