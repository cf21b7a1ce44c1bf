# core/timeutils.py
from datetime import datetime, timezone


def isoformat_utc(moment: datetime) -> str:
    """
    Serializa no formato usado em dateCreated/dateModified:
    UTC, precisão de milissegundos e sufixo "Z" (ex.: 2024-05-12T13:45:00.000Z).

    Como o formato é fixo, comparar essas strings equivale a comparar as datas.
    """
    text = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def utc_date_stamp(moment: datetime) -> str:
    """Data UTC no formato YYYYMMDD."""
    return moment.astimezone(timezone.utc).strftime("%Y%m%d")
