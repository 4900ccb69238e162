import logging
import re
from dataclasses import dataclass
from typing import List, Mapping, Optional

logger = logging.getLogger(__name__)

TRUSTED_HEADER = "X-Forefront-Antispam-Report"
UNTRUSTED_HEADER = "X-Forefront-Antispam-Report-Untrusted"

# Longitud máxima del valor crudo que se guarda en el resultado
MAX_HEADER_LENGTH = 4096

SCL_MIN = -1
SCL_MAX = 9

# "SCL:" en cualquier posición (XSCL:5 también vale), signo menos opcional y dígitos ASCII.
# Un ".5" final queda fuera del match: SCL:5.5 se lee como 5.
_SCL_RE = re.compile(r"SCL:(-?[0-9]+)")


@dataclass(frozen=True)
class SCLResult:
    score: int
    description: str
    header_source: str
    raw_header: str


def describe_scl(score: int) -> str:
    if score == -1:
        return "Skipped spam filtering (safe sender or SCL override)"
    if 0 <= score <= 1:
        return "Not spam"
    if 2 <= score <= 4:
        return "Low spam probability"
    if 5 <= score <= 6:
        return "Spam"
    if 7 <= score <= 9:
        return "High confidence spam"
    return "Unknown spam confidence level"


def _sanitize(raw: str) -> str:
    clean = raw.replace("\r", "").replace("\n", "")
    return clean[:MAX_HEADER_LENGTH]


def parse_scl_header(raw: str, header_source: str) -> Optional[SCLResult]:
    """
    Busca el primer token SCL en el valor de una cabecera antispam.
    Devuelve None si no hay token, si el token está mal formado o si el
    valor queda fuera de [-1, 9]. Nunca lanza excepciones por la entrada.
    """
    clean = _sanitize(raw)
    match = _SCL_RE.search(clean)
    if not match:
        return None
    try:
        score = int(match.group(1))
    except ValueError:
        return None

    if score < SCL_MIN or score > SCL_MAX:
        # El valor puede tener miles de dígitos
        logger.warning("Ignoring out-of-range SCL %s in %s", match.group(1)[:16], header_source)
        return None

    return SCLResult(
        score=score,
        description=describe_scl(score),
        header_source=header_source,
        raw_header=clean,
    )


def extract_scl(headers: Mapping[str, List[str]]) -> Optional[SCLResult]:
    # El trusted siempre gana si produce un valor válido
    for name in (TRUSTED_HEADER, UNTRUSTED_HEADER):
        values = headers.get(name)
        if not values or not values[0]:
            continue
        result = parse_scl_header(values[0], name)
        if result is not None:
            logger.debug("SCL %d read from %s", result.score, name)
            return result
    return None
