"""Tests for the demo registry."""

from __future__ import annotations

import importlib

import pytest

from catalogue import DEMOS
from core.domain.category import Category


def test_slugs_are_unique():
    slugs = [info.slug for info in DEMOS]
    assert len(slugs) == len(set(slugs))


def test_slug_prefix_matches_category():
    for info in DEMOS:
        assert info.slug.split("/", 1)[0] == info.category.value


def test_every_category_has_demos():
    assert {info.category for info in DEMOS} == set(Category)


@pytest.mark.parametrize("info", DEMOS, ids=lambda info: info.slug)
def test_module_exposes_main(info):
    module = importlib.import_module(info.module)
    assert callable(getattr(module, "main", None))


@pytest.mark.parametrize("info", DEMOS, ids=lambda info: info.slug)
def test_demo_prints_something(info, trace):
    module = importlib.import_module(info.module)
    assert trace(module.main)
