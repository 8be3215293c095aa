#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import discord
from discord.ext import commands

from utils.patterns import DATE_TEMPLATES, TIME_TEMPLATES, YEARLESS_DATE_TEMPLATES


def format_templates(templates, per_line: int = 4) -> str:
    lines = []
    for start in range(0, len(templates), per_line):
        lines.append(" ".join(f"`{t}`" for t in templates[start:start + per_line]))
    return "\n".join(lines)


class HelpCog(commands.Cog):
    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @commands.command(name="aide", aliases=["help"])
    async def aide_command(self, ctx: commands.Context):
        embed = discord.Embed(
            title="Commandes Chrono",
            description=(
                "Le bot lit les dates, heures et durées tapées librement.\n"
                "Les noms de mois sont en anglais (`Jan`, `January`)."
            ),
            color=discord.Color.blue()
        )

        embed.add_field(
            name=":stopwatch: Durées",
            value=(
                "__**!periode <texte>**__\n"
                "> Unités `w` `d` `h` `m` `s` (ex.: `!periode 1w2d`, `!periode 3h30m`).\n"
            ),
            inline=False
        )

        embed.add_field(
            name=":calendar: Dates",
            value=(
                "__**!date <texte>**__\n"
                "> Année facultative, suffixes `1st`/`2nd` acceptés (ex.: `!date Jan 1st, 2019`).\n"
            ),
            inline=False
        )

        embed.add_field(
            name=":clock4: Instants",
            value=(
                "__**!quand <texte>**__\n"
                "> Heure seule, date + heure, date seule, ou durée écoulée (ex.: `!quand 4:30pm`, `!quand 2h`).\n"
                "> Une heure encore à venir aujourd’hui désigne la veille.\n\n"
                "__**!fuseau [zone]**__\n"
                "> Affiche ou règle ton fuseau (ex.: `!fuseau Europe/Paris`).\n"
            ),
            inline=False
        )

        embed.add_field(
            name="Formats de date",
            value=format_templates(DATE_TEMPLATES + YEARLESS_DATE_TEMPLATES),
            inline=False
        )
        embed.add_field(
            name="Formats d’heure",
            value=format_templates(TIME_TEMPLATES),
            inline=False
        )

        embed.set_footer(text="Une date et une heure se combinent avec un espace ou une virgule, dans les deux sens.")
        await ctx.send(embed=embed)


async def setup(bot: commands.Bot):
    await bot.add_cog(HelpCog(bot))
