"""Shared fixtures for tests — synthetic responses and documents, no I/O."""

from __future__ import annotations

import textwrap

import pytest
from samples import (
    PRUNING,
    PRUNING_VARIANT,
    SOLAR,
    SOLAR_VARIANT,
    SONGBIRDS,
    SONGBIRDS_VARIANT,
    WETLANDS,
    WETLANDS_VARIANT,
    make_document,
)

from citelink.documents.schemas import SourceDocument


# ---------------------------------------------------------------------------
# Document fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def wetlands_doc() -> SourceDocument:
    return make_document("wetlands", WETLANDS)


@pytest.fixture
def estuary_doc() -> SourceDocument:
    return make_document("estuary", WETLANDS_VARIANT + ".")


@pytest.fixture
def solar_doc() -> SourceDocument:
    return make_document("solar", SOLAR_VARIANT + ".")


@pytest.fixture
def pruning_doc() -> SourceDocument:
    return make_document("pruning", PRUNING_VARIANT + ".")


@pytest.fixture
def songbirds_doc() -> SourceDocument:
    return make_document("songbirds", SONGBIRDS_VARIANT + ".")


@pytest.fixture
def all_docs(wetlands_doc, solar_doc, pruning_doc, songbirds_doc) -> list[SourceDocument]:
    return [wetlands_doc, solar_doc, pruning_doc, songbirds_doc]


# ---------------------------------------------------------------------------
# Response fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def markdown_response() -> str:
    return textwrap.dedent(f"""\
        ## Summary

        Here is what the sources say.

        - {WETLANDS}
        - {SOLAR}

        Thanks for asking""")


@pytest.fixture
def four_sentence_response() -> str:
    return " ".join([SONGBIRDS, SOLAR, WETLANDS, PRUNING])
