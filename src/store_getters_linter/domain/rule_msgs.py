"""Pure message-building from the message template. No I/O or infrastructure imports."""

from store_getters_linter.domain.constants import (
    MESSAGE_TEMPLATE,
    METHOD_PLACEHOLDER,
    RULE_CODE,
    RULE_DESCRIPTION,
    RULE_SYMBOL,
)


class RuleMsgBuilder:
    """Renders the getter-mutation message and builds the Pylint msgs dict."""

    @staticmethod
    def render(method: str, template: str = MESSAGE_TEMPLATE) -> str:
        """Substitute the mutating method's name into the template."""
        return template.replace(METHOD_PLACEHOLDER, method)

    @staticmethod
    def build_msgs() -> dict[str, tuple[str, str, str]]:
        """Return { code: (message_template, symbol, description) } for checker.msgs.

        Pylint interpolates `args` with %-formatting, so the placeholder becomes %s.
        """
        pylint_template = MESSAGE_TEMPLATE.replace("%", "%%").replace(METHOD_PLACEHOLDER, "%s")
        return {RULE_CODE: (pylint_template, RULE_SYMBOL, RULE_DESCRIPTION)}
