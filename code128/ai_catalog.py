"""
GS1 Application Identifier catalogue.

Static table of the Application Identifiers the GS1 generator writes, with
longest-prefix matching so a decoded element string such as "42184020500"
can be split into its AI ("421") and data ("84020500").

Reference: https://www.gs1.org/standards/barcodes/application-identifiers
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple


@dataclass(frozen=True)
class AIEntry:
    """
    A single GS1 Application Identifier.

    Attributes:
        ai: The Application Identifier code (2-4 digits)
        title: Human-readable title
        data_format: GS1 format notation of the data, e.g. 'N6' or 'X..20'
        decimal_positions: Implied decimal places (last AI digit of 31nn-39nn)
    """
    ai: str
    title: str
    data_format: str = "X..30"
    decimal_positions: Optional[int] = None


@dataclass(frozen=True)
class AIRecord:
    """A decoded element string split into AI and data."""
    ai: str
    data: str
    title: Optional[str] = None

    @property
    def known(self) -> bool:
        return self.title is not None

    def __str__(self) -> str:
        return f"({self.ai}){self.data}"


class TrieNode:
    """Trie node for AI prefix matching."""
    __slots__ = ['children', 'ai_entry']

    def __init__(self):
        self.children: Dict[str, TrieNode] = {}
        self.ai_entry: Optional[AIEntry] = None


class AITrie:
    """
    Trie for O(k) AI lookup where k is AI length (2-4).
    """

    def __init__(self, entries: Iterable[AIEntry] = ()):
        self.root = TrieNode()
        self._all_ais: Dict[str, AIEntry] = {}
        for entry in entries:
            self.insert(entry)

    def insert(self, entry: AIEntry) -> None:
        node = self.root
        for char in entry.ai:
            node = node.children.setdefault(char, TrieNode())
        node.ai_entry = entry
        self._all_ais[entry.ai] = entry

    def find_longest_match(self, text: str) -> Tuple[Optional[AIEntry], int]:
        """
        Find the longest AI that prefixes text.
        Returns (AIEntry, length) or (None, 0) if no match.
        """
        node = self.root
        last_match: Optional[AIEntry] = None
        last_match_len = 0
        for i, char in enumerate(text[:4]):
            if char not in node.children:
                break
            node = node.children[char]
            if node.ai_entry is not None:
                last_match = node.ai_entry
                last_match_len = i + 1
        return last_match, last_match_len

    def get(self, ai: str) -> Optional[AIEntry]:
        return self._all_ais.get(ai)

    def __contains__(self, ai: str) -> bool:
        return ai in self._all_ais

    def __len__(self) -> int:
        return len(self._all_ais)


_SIMPLE = [
    ("00", "SSCC", "N18"),
    ("01", "GTIN", "N14"),
    ("02", "CONTENT", "N14"),
    ("10", "BATCH/LOT", "X..20"),
    ("11", "PROD DATE", "N6"),
    ("12", "DUE DATE", "N6"),
    ("13", "PACK DATE", "N6"),
    ("15", "BEST BEFORE or BEST BY", "N6"),
    ("16", "SELL BY", "N6"),
    ("17", "USE BY or EXPIRY", "N6"),
    ("20", "VARIANT", "N2"),
    ("21", "SERIAL", "X..20"),
    ("22", "CPV", "X..20"),
    ("240", "ADDITIONAL ID", "X..30"),
    ("241", "CUST. PART No.", "X..30"),
    ("242", "MTO VARIANT", "N..6"),
    ("243", "PCN", "X..20"),
    ("250", "SECONDARY SERIAL", "X..30"),
    ("251", "REF. TO SOURCE", "X..30"),
    ("253", "GDTI", "N13+X..17"),
    ("254", "GLN EXTENSION COMPONENT", "X..20"),
    ("255", "GCN", "N13+N..12"),
    ("30", "VAR. COUNT", "N..8"),
    ("37", "COUNT", "N..8"),
    ("400", "ORDER NUMBER", "X..30"),
    ("401", "GINC", "X..30"),
    ("402", "GSIN", "N17"),
    ("403", "ROUTE", "X..30"),
    ("420", "SHIP TO POST", "X..20"),
    ("421", "SHIP TO POST", "N3+X..9"),
    ("422", "ORIGIN", "N3"),
    ("423", "COUNTRY - INITIAL PROCESS", "N3+N..12"),
    ("424", "COUNTRY - PROCESS", "N3"),
    ("425", "COUNTRY - DISASSEMBLY", "N3+N..12"),
    ("426", "COUNTRY - FULL PROCESS", "N3"),
    ("3420", "SRV DESCRIPTION", "N2"),
    ("3421", "DANGEROUS GOODS", "N1"),
    ("3422", "AUTH LEAVE", "N1"),
    ("3423", "SIG REQUIRED", "N1"),
    ("3426", "REL DATE", "N6"),
    ("7001", "NSN", "N13"),
    ("7004", "ACTIVE POTENCY", "N..4"),
    ("7005", "CATCH AREA", "X..12"),
    ("7006", "FIRST FREEZE DATE", "N6"),
    ("7007", "HARVEST DATE", "N6..12"),
    ("7010", "AQUATIC SPECIES", "X..2"),
    ("7240", "PROTOCOL", "X..20"),
    ("8001", "DIMENSIONS", "N14"),
    ("8002", "CMT No.", "X..20"),
    ("8003", "GRAI", "N14+X..16"),
    ("8004", "GIAI", "X..30"),
    ("8007", "IBAN", "X..34"),
    ("8012", "VERSION", "X..20"),
    ("8013", "GMN", "X..25"),
    ("8017", "GSRN - PROVIDER", "N18"),
    ("8018", "GSRN - RECIPIENT", "N18"),
    ("8019", "SRIN", "N..10"),
    ("8020", "REF No.", "X..25"),
    ("8200", "PRODUCT URL", "X..70"),
    ("90", "INTERNAL", "X..30"),
]

# AI families whose last digit is the number of decimal places
_DECIMAL_FAMILIES = [
    ("310", "NET WEIGHT (kg)", "N6"),
    ("311", "LENGTH (m)", "N6"),
    ("312", "WIDTH (m)", "N6"),
    ("313", "HEIGHT (m)", "N6"),
    ("314", "AREA (m2)", "N6"),
    ("315", "NET VOLUME (l)", "N6"),
    ("316", "NET VOLUME (m3)", "N6"),
    ("330", "GROSS WEIGHT (kg)", "N6"),
    ("331", "LENGTH (m), log", "N6"),
    ("332", "WIDTH (m), log", "N6"),
    ("333", "HEIGHT (m), log", "N6"),
    ("334", "AREA (m2), log", "N6"),
    ("335", "VOLUME (l), log", "N6"),
    ("336", "VOLUME (m3), log", "N6"),
    ("390", "AMOUNT", "N..15"),
    ("391", "AMOUNT", "N3+N..15"),
    ("392", "PRICE", "N..15"),
    ("393", "PRICE", "N3+N..15"),
]


def _build_entries():
    for ai, title, fmt in _SIMPLE:
        yield AIEntry(ai, title, fmt)
    for prefix, title, fmt in _DECIMAL_FAMILIES:
        for y in range(10):
            yield AIEntry(f"{prefix}{y}", title, fmt, decimal_positions=y)
    for y in range(10):
        yield AIEntry(f"723{y}", "CERT # " + str(y + 1), "X2+X..28")
    for n in range(91, 100):
        yield AIEntry(str(n), "INTERNAL", "X..90")


AI_CATALOG: Dict[str, AIEntry] = {entry.ai: entry for entry in _build_entries()}

_TRIE = AITrie(AI_CATALOG.values())


def lookup_ai(ai: str) -> Optional[AIEntry]:
    """Get the catalogue entry of an exact AI code."""
    return _TRIE.get(ai)


def split_element(element: str) -> AIRecord:
    """
    Split a decoded element string into AI and data.

    Unknown AIs fall back to the first two digits with no title.
    """
    entry, length = _TRIE.find_longest_match(element)
    if entry is not None:
        return AIRecord(ai=entry.ai, data=element[length:], title=entry.title)
    return AIRecord(ai=element[:2], data=element[2:])
