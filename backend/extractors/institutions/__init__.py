"""
Institution rule sets, keyed "<institution>_<transaction type>".
"""

from types import MappingProxyType
from typing import Mapping

from ..regex_extractor import FieldExtractor
from . import afirme, banbajio, banorte, banregio, bbva, hsbc, santander, scotiabank

EXTRACTORS: Mapping[str, FieldExtractor] = MappingProxyType({
    extractor.key: extractor
    for extractor in (
        afirme.SPEI,
        banbajio.SPEI,
        banorte.THIRD_PARTY,
        banregio.SPEI,
        banregio.THIRD_PARTY,
        bbva.SPEI,
        bbva.THIRD_PARTY,
        hsbc.SPEI,
        santander.SPEI,
        santander.THIRD_PARTY,
        scotiabank.SPEI,
    )
})

__all__ = ['EXTRACTORS']
