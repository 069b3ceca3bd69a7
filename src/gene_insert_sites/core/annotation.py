"""
Reading EMBL or GenBank annotations into genomic features.
"""

from pathlib import Path
from typing import Dict, Iterator, List, Optional
import gzip
import structlog
from Bio import SeqIO

from ..exceptions import AnnotationReadError
from ..models.features import FeatureKind, GenomicFeature


_KINDS = {kind.value: kind for kind in FeatureKind}


def read_annotation(
    annotation_file: Path,
    annotation_format: str = "embl",
    logger: Optional[structlog.BoundLogger] = None
) -> Iterator[GenomicFeature]:
    """
    Yield the gene, CDS and polypeptide features of an annotation file.

    Args:
        annotation_file: EMBL or GenBank file, optionally gzip compressed
        annotation_format: "embl" or "genbank"
        logger: Optional logger instance

    Yields:
        GenomicFeature objects in annotation order
    """
    annotation_file = Path(annotation_file)
    try:
        if annotation_file.suffix == ".gz":
            handle = gzip.open(annotation_file, 'rt')
        else:
            handle = open(annotation_file, 'r')
    except OSError as e:
        raise AnnotationReadError(annotation_file, str(e)) from e

    with handle:
        try:
            records = list(SeqIO.parse(handle, annotation_format))
        except (ValueError, OSError, EOFError) as e:
            raise AnnotationReadError(annotation_file, str(e)) from e

        if not records:
            raise AnnotationReadError(annotation_file, f"no {annotation_format} records found")
        if logger is not None and len(records) > 1:
            logger.warning(
                "Annotation holds several sequences, all are read against one profile",
                annotation_file=str(annotation_file),
                sequences=[record.id for record in records]
            )

        for record in records:
            for seq_feature in record.features:
                kind = _KINDS.get(seq_feature.type)
                if kind is None:
                    continue
                yield _to_genomic_feature(kind, seq_feature, record.id)


def _to_genomic_feature(kind: FeatureKind, seq_feature, sequence_id: str) -> GenomicFeature:
    location = seq_feature.location
    tags: Dict[str, List[str]] = {
        name: [str(value) for value in values]
        for name, values in seq_feature.qualifiers.items()
    }
    return GenomicFeature(
        kind=kind,
        start=int(location.start) + 1,
        end=int(location.end),
        strand=-1 if location.strand == -1 else 1,
        tags=tags,
        sequence_id=sequence_id,
    )
