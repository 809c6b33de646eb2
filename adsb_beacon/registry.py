"""Address-to-jurisdiction classifier."""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from adsb_beacon import registry_rules
from adsb_beacon.errors import ClassificationFallback

logger = logging.getLogger(__name__)

ADDRESS_BITS = 24


@dataclass(frozen=True)
class JurisdictionRule:
    """A binary prefix, the label it assigns, and ordered overrides tried after it matches."""
    prefix: str
    label: str
    overrides: Tuple["JurisdictionRule", ...] = ()

    def matches(self, binary_address: str) -> bool:
        return binary_address.startswith(self.prefix)

    def resolve(self, binary_address: str) -> str:
        """Label for an address already known to match this rule."""
        for override in self.overrides:
            if override.matches(binary_address):
                return override.resolve(binary_address)
        return self.label


def load_rules(table: Iterable[tuple]) -> Tuple[JurisdictionRule, ...]:
    """
    Build JurisdictionRule objects from a declarative table.

    Args:
        table: Entries of (prefix, label) or (prefix, label, overrides)

    Returns:
        Rules in table order

    Raises:
        ValueError: if a prefix is not a binary string of at most 24 bits
    """
    rules = []
    for entry in table:
        prefix, label = entry[0], entry[1]
        overrides = entry[2] if len(entry) > 2 else ()
        if not prefix or len(prefix) > ADDRESS_BITS or set(prefix) - {'0', '1'}:
            raise ValueError(f"Invalid rule prefix for {label}: {prefix!r}")
        rules.append(JurisdictionRule(prefix, label, load_rules(overrides)))
    return tuple(rules)


def address_to_binary(address: str) -> str:
    """
    Expand a hex address to 24 bits, most significant first.

    Shorter addresses are zero-padded on the left.

    Raises:
        ValueError: if the address is not hexadecimal or exceeds 24 bits
    """
    value = int(address, 16)
    if value < 0 or value >= 1 << ADDRESS_BITS:
        raise ValueError(f"Address out of range: {address}")
    return format(value, f'0{ADDRESS_BITS}b')


class RegistryClassifier:
    """
    Ordered decision list over address prefixes.

    Not a longest-prefix match: the first top-level rule that matches wins,
    then its overrides are tried in listed order. Regional blocks are only
    consulted when no top-level rule matched.
    """

    def __init__(self, rules: Optional[Iterable[tuple]] = None,
                 regional_rules: Optional[Iterable[tuple]] = None,
                 unknown_label: str = registry_rules.UNKNOWN_REGISTRY):
        self.rules = load_rules(registry_rules.TOP_LEVEL_RULES if rules is None else rules)
        self.regional_rules = load_rules(
            registry_rules.REGIONAL_RULES if regional_rules is None else regional_rules
        )
        self.unknown_label = unknown_label
        logger.debug(f"Loaded {len(self.rules)} registry rule(s), {len(self.regional_rules)} regional")

    def lookup_rule(self, binary_address: str) -> JurisdictionRule:
        """
        Find the first top-level (then regional) rule matching an address.

        Raises:
            ClassificationFallback: if nothing matches
        """
        for rule_list in (self.rules, self.regional_rules):
            for rule in rule_list:
                if rule.matches(binary_address):
                    return rule
        raise ClassificationFallback(binary_address)

    def classify(self, address: str) -> str:
        """
        Return the jurisdiction label for a hex address.

        Always returns a label; malformed or unmatched addresses get the
        unknown-registry sentinel.
        """
        try:
            binary_address = address_to_binary(address)
        except ValueError:
            logger.debug(f"Unclassifiable address '{address}'")
            return self.unknown_label

        try:
            rule = self.lookup_rule(binary_address)
        except ClassificationFallback:
            return self.unknown_label
        return rule.resolve(binary_address)

    def count_rules(self) -> dict:
        """Number of rules per level, for diagnostics."""
        overrides = sum(self._count_overrides(rule) for rule in self.rules)
        return {
            'top_level': len(self.rules),
            'overrides': overrides,
            'regional': len(self.regional_rules),
        }

    def _count_overrides(self, rule: JurisdictionRule) -> int:
        return sum(1 + self._count_overrides(o) for o in rule.overrides)
