"""Parsed form of a key binding expression."""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from .enums import BindingKind

KEY_PREFIX = "KEY_"
COMMAND_PREFIX = "!"
ACTION_PREFIX = ">"
MODE_SWITCH_PREFIX = ">mode "
MODE_NEXT_PREFIXES = (">modeup", ">modenext")
MODE_PREV_PREFIXES = (">modedown", ">modeprev")


class Binding(BaseModel):
    """A binding expression classified into exactly one BindingKind.

    Grammar::

        ""                       UNBOUND
        KEY_<name>               KEY          (no '+')
        KEY_<name>+...           COMBO
        !<command>               COMMAND
        >modeup... / >modenext.. MODE_NEXT
        >modedown.. / >modeprev. MODE_PREV
        >mode <name>             MODE_SWITCH
        >...                     ACTION
        anything else            UNKNOWN
    """

    model_config = ConfigDict(frozen=True)

    expression: str = Field(description="Binding exactly as written in the profile")
    kind: BindingKind = Field(description="Grammar rule the expression matched")
    key_name: str | None = Field(default=None, description="Key name without KEY_ prefix")
    target: str | None = Field(default=None, description="Mode named by >mode <name>")

    @classmethod
    def parse(cls, expression: str) -> "Binding":
        """Parse an expression, caching results per distinct string."""
        return _parse(expression)


@lru_cache(maxsize=512)
def _parse(expression: str) -> Binding:
    if expression == "":
        return Binding(expression=expression, kind=BindingKind.UNBOUND)

    if expression.startswith(KEY_PREFIX):
        name = expression[len(KEY_PREFIX):]
        head, plus, _ = name.partition("+")
        if not head:
            return Binding(expression=expression, kind=BindingKind.UNKNOWN)
        if plus:
            return Binding(expression=expression, kind=BindingKind.COMBO)
        return Binding(expression=expression, kind=BindingKind.KEY, key_name=name)

    if expression.startswith(COMMAND_PREFIX):
        return Binding(expression=expression, kind=BindingKind.COMMAND)

    if expression.startswith(ACTION_PREFIX):
        if expression.startswith(MODE_NEXT_PREFIXES):
            return Binding(expression=expression, kind=BindingKind.MODE_NEXT)
        if expression.startswith(MODE_PREV_PREFIXES):
            return Binding(expression=expression, kind=BindingKind.MODE_PREV)
        if expression.startswith(MODE_SWITCH_PREFIX) and len(expression) > len(MODE_SWITCH_PREFIX):
            return Binding(
                expression=expression,
                kind=BindingKind.MODE_SWITCH,
                target=expression[len(MODE_SWITCH_PREFIX):],
            )
        return Binding(expression=expression, kind=BindingKind.ACTION)

    return Binding(expression=expression, kind=BindingKind.UNKNOWN)
