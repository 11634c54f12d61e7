from __future__ import annotations

import pytest

from gffcodec.core.codecs import Strand
from gffcodec.core.record import GFFRecord

SAMPLE_LINES = [
    "P0A7B8\tUniProtKB\tInitiator methionine\t1\t1\t.\t.\t.\tNote=Removed,Obsolete;ID=test",
    "P0A7B8\tUniProtKB\tChain\t2\t176\t50\t+\t.\tNote=ATP-dependent protease subunit HslV;ID=PRO_0000148105",
]


@pytest.fixture
def sample_lines():
    return list(SAMPLE_LINES)


@pytest.fixture
def sample_text():
    return "\n".join(SAMPLE_LINES)


@pytest.fixture
def sample_records():
    """The in-memory counterparts of the sample lines."""
    return [
        GFFRecord(
            seqname="P0A7B8",
            source="UniProtKB",
            feature="Initiator methionine",
            start=1,
            end=1,
            score=None,
            strand=Strand.ABSENT,
            frame=None,
            attributes="Note=Removed,Obsolete;ID=test",
        ),
        GFFRecord(
            seqname="P0A7B8",
            source="UniProtKB",
            feature="Chain",
            start=2,
            end=176,
            score=50.0,
            strand=Strand.FORWARD,
            frame=None,
            attributes="Note=ATP-dependent protease subunit HslV;ID=PRO_0000148105",
        ),
    ]


@pytest.fixture
def gff_path(tmp_path, sample_lines):
    path = tmp_path / "sample.gff3"
    path.write_text("##gff-version 3\n" + "\n".join(sample_lines) + "\n", encoding="utf-8")
    return path
