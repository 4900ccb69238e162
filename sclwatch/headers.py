from email import policy
from email.message import Message
from email.parser import HeaderParser
from pathlib import Path
from typing import Dict, List, Union

HeaderSet = Dict[str, List[str]]


def headers_from_message(msg: Message) -> HeaderSet:
    """
    Agrupa las cabeceras por nombre exacto (sensible a mayúsculas) en el
    orden en que aparecen. Las cabeceras repetidas conservan su orden.
    """
    headers: HeaderSet = {}
    for name, value in msg.items():
        headers.setdefault(name, []).append(str(value))
    return headers


def headers_from_text(text: str) -> HeaderSet:
    # Solo el bloque de cabeceras; compat32 deja los valores como strings crudos
    msg = HeaderParser(policy=policy.compat32).parsestr(text)
    return headers_from_message(msg)


def headers_from_file(path: Union[str, Path]) -> HeaderSet:
    # Se decodifica aquí como UTF-8: con BytesHeaderParser los bytes de 8 bits
    # acaban como Header(unknown-8bit) y str() los convierte en U+FFFD
    data = Path(path).read_bytes()
    return headers_from_text(data.decode("utf-8", errors="replace"))
