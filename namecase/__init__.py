from namecase.names import (
    CaseAnalysis,
    NameCaseConfig,
    NameNormaliser,
    analyse,
    is_all_punctuation,
    is_blank,
    is_normalised,
    normalise,
    normalise_whitespace_to_empty,
)

__all__ = [
    "CaseAnalysis",
    "NameCaseConfig",
    "NameNormaliser",
    "analyse",
    "is_all_punctuation",
    "is_blank",
    "is_normalised",
    "normalise",
    "normalise_whitespace_to_empty",
]
