"""Sample sentences and builders shared by the test modules."""

from __future__ import annotations

from citelink.documents.schemas import SourceDocument
from citelink.pipeline.schemas import Citation

# ---------------------------------------------------------------------------
# Sentences
#
# Token counts (tokens longer than 2 chars) are noted so the expected
# Jaccard scores of the document variants below can be checked by hand.
# ---------------------------------------------------------------------------

# 15 tokens
WETLANDS = (
    "The coastal wetlands absorb storm surges and provide critical "
    "nursery habitat for juvenile fish species."
)
# 13 tokens; "gradually" -> "slowly" gives 12/14
SOLAR = (
    "Solar panel efficiency declines gradually as operating temperatures "
    "rise above twenty five degrees Celsius."
)
SOLAR_VARIANT = (
    "Solar panel efficiency declines slowly as operating temperatures "
    "rise above twenty five degrees Celsius"
)
# 14 tokens; "larger" -> "bigger" gives 13/15
PRUNING = (
    "Regular pruning of fruit trees during dormancy encourages stronger "
    "branches and larger harvests next season."
)
PRUNING_VARIANT = (
    "Regular pruning of fruit trees during dormancy encourages stronger "
    "branches and bigger harvests next season"
)
# 12 tokens; "stars" -> "planets" gives 11/13
SONGBIRDS = (
    "Migratory songbirds navigate thousands of kilometres using the "
    "position of the stars and the magnetic field."
)
SONGBIRDS_VARIANT = (
    "Migratory songbirds navigate thousands of kilometres using the "
    "position of the planets and the magnetic field"
)
# WETLANDS with "critical" -> "essential" gives 14/16
WETLANDS_VARIANT = (
    "The coastal wetlands absorb storm surges and provide essential "
    "nursery habitat for juvenile fish species"
)


def make_document(doc_id: str, body: str) -> SourceDocument:
    content = (
        "Field notes compiled by the regional survey team last spring. "
        f"{body} "
        "Further observations will be published in the next quarterly bulletin."
    )
    return SourceDocument(id=doc_id, name=f"{doc_id}.txt", type="txt", content=content)


def make_citation(
    start: int,
    end: int,
    confidence: float,
    doc: str = "a.txt",
    citation_id: str = "candidate",
) -> Citation:
    return Citation(
        id=citation_id,
        source_document=doc,
        source_type="txt",
        text_snippet="snippet",
        start_index=0,
        end_index=7,
        confidence=confidence,
        highlighted_text="x" * (end - start),
        response_start_index=start,
        response_end_index=end,
    )

