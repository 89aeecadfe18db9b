"""
Training corpora.

Corpus files hold one name per line. Blank lines and lines starting with
``#`` are skipped.
"""

from pathlib import Path
from typing import Iterator, List, Union

DATA_DIR = Path(__file__).parent / 'data'
DEFAULT_CORPUS_PATH = DATA_DIR / 'romans.txt'


def read_corpus(path: Union[str, Path]) -> Iterator[str]:
    """Yield names from a UTF-8 file, one per line."""
    with open(path, 'r', encoding='utf-8') as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith('#'):
                yield line


def default_corpus() -> List[str]:
    """Bundled Roman names."""
    return list(read_corpus(DEFAULT_CORPUS_PATH))
