from types import SimpleNamespace

import pytest

from help import HelpCog, format_templates


class FakeContext:
    def __init__(self):
        self.sent = []

    async def send(self, content=None, *, embed=None):
        self.sent.append(SimpleNamespace(content=content, embed=embed))


def test_format_templates_groups_lines():
    assert format_templates(("a", "b", "c"), per_line=2) == "`a` `b`\n`c`"


@pytest.mark.asyncio
async def test_aide_lists_commands_and_formats():
    cog = HelpCog(SimpleNamespace())
    ctx = FakeContext()
    await cog.aide_command.callback(cog, ctx)
    embed = ctx.sent[-1].embed
    names = [field.name for field in embed.fields]
    assert "Formats de date" in names
    values = "\n".join(field.value for field in embed.fields)
    assert "!quand" in values
    assert "`MMM d, yyyy`" in values
    assert "`h:mm tt`" in values
