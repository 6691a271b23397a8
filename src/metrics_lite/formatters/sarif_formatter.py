"""SARIF 2.1.0 diagnostics document for subroutine threshold checks.

Every result is recorded at level ``"error"``. The emitter does not look at
thresholds; whatever the text report forwards is recorded, so when
``show_only_errors`` is off every subroutine ends up in the document.
"""

import copy
from typing import Any, Dict, List

from .. import __version__
from ..logging_config import get_logger
from ..models import SubroutineMetric

logger = get_logger(__name__)

SARIF_VERSION = "2.1.0"
SARIF_SCHEMA = "http://json.schemastore.org/sarif-2.1.0-rtm.5"
TOOL_NAME = "metrics-lite"
RULE_ID = "cyclomatic-complexity"
RESULT_LEVEL = "error"
MESSAGE_TEMPLATE = "cyclomatic complexity '{0}' for method '{1}' is too high"


def _empty_document() -> Dict[str, Any]:
    return {
        "version": SARIF_VERSION,
        "$schema": SARIF_SCHEMA,
        "runs": [
            {
                "tool": {
                    "driver": {
                        "name": TOOL_NAME,
                        "version": __version__,
                        "rules": [
                            {
                                "id": RULE_ID,
                                "defaultConfiguration": {"level": RESULT_LEVEL},
                            }
                        ],
                    }
                },
                "results": [],
            }
        ],
    }


class SarifEmitter:
    """Accumulates diagnostics results into one SARIF document."""

    def __init__(self) -> None:
        self._document: Dict[str, Any] = _empty_document()

    @property
    def results(self) -> List[Dict[str, Any]]:
        return self._document["runs"][0]["results"]

    def begin_document(self) -> None:
        """Start a fresh document, dropping anything recorded so far.

        Call once per report invocation, before any subroutine rows.
        """
        if self.results:
            logger.warning(
                f"Diagnostics document re-initialized; discarding {len(self.results)} results"
            )
        self._document = _empty_document()

    def record_violation(self, sub: SubroutineMetric) -> None:
        """Append one result for ``sub`` at level "error"."""
        self.results.append(
            {
                "level": RESULT_LEVEL,
                "ruleIndex": 0,
                "ruleId": RULE_ID,
                "message": {
                    "text": MESSAGE_TEMPLATE,
                    "arguments": [str(sub.mccabe_complexity), str(sub.name)],
                },
                "locations": [
                    {
                        "physicalLocation": {
                            "artifactLocation": {"uri": f"file://{sub.path}"},
                            "region": {"startLine": sub.line_number},
                        }
                    }
                ],
            }
        )

    def serialize(self) -> Dict[str, Any]:
        """Return the accumulated document as a standalone value."""
        return copy.deepcopy(self._document)
