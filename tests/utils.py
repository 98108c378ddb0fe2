from quantypes.core.utils import NBSP


def _plain(text: str) -> str:
    """Swap the no-break space used in displays for a plain one."""
    return text.replace(NBSP, " ")
