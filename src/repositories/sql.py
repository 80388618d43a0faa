import re
from typing import Any, Mapping

_PLACEHOLDER = re.compile(r'(?<![:\w]):([A-Za-z_][A-Za-z0-9_]*)')


def bind(query: str, params: Mapping[str, Any]) -> tuple[str, list[Any]]:
    """Compile ``:name`` placeholders to asyncpg's ``$n`` form.

    Returns the rewritten query and the positional arguments in placeholder
    order. A name used twice maps to the same ``$n``. Every placeholder must
    have a value and every value must have a placeholder.
    """
    positions: dict[str, int] = {}
    args: list[Any] = []

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name not in positions:
            if name not in params:
                raise ValueError(f'No value bound for parameter :{name}')
            args.append(params[name])
            positions[name] = len(args)
        return f'${positions[name]}'

    sql = _PLACEHOLDER.sub(_replace, query)
    unused = set(params) - set(positions)
    if unused:
        raise ValueError(f'Parameters not used by the query: {", ".join(sorted(unused))}')
    return sql, args
