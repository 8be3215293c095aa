#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Cog : Chrono
------------
Commandes de lecture de dates, d'heures et de durées tapées librement.

• `!periode 1w2d`      → durée normalisée (« 9d 0h »)
• `!date Jan 1st`      → date du calendrier, année facultative
• `!quand 4:30pm`      → instant dans le fuseau du membre + timestamp Discord
• `!fuseau Europe/Paris` → choisit le fuseau utilisé par `!quand`
"""

from __future__ import annotations

import logging
from datetime import tzinfo
from typing import Dict, Optional

import discord
from discord.ext import commands

from utils import ZoneNotFound, parse_date, parse_datetime, parse_period, resolve_zone, year_omitted
from utils.clock import ClockProvider, SystemClock
from utils.formats import format_date, format_duration, format_zoned_datetime
from utils import settings

log = logging.getLogger(__name__)

EXEMPLES_PERIODE = "`2d`, `1w2d`, `3h30m`"
EXEMPLES_DATE = "`Jan 1st, 2019`, `2019-01-01`, `Jan 1`"
EXEMPLES_QUAND = "`4:30pm`, `23:30 2019-01-01`, `2h`, `Jan 1`"


def _zone_name(zone: tzinfo) -> str:
    return str(getattr(zone, "key", None) or zone)


class ChronoCog(commands.Cog):
    """Lecture des dates et durées pour les membres du serveur."""

    def __init__(self, bot: commands.Bot, clock: Optional[ClockProvider] = None):
        self.bot = bot
        self.clock = clock or SystemClock()
        self.default_zone = settings.resolve_default_timezone()
        self.nudge_to_past = settings.resolve_nudge_to_past()
        # pas de persistance : les fuseaux choisis vivent le temps de la session
        self.user_zones: Dict[int, tzinfo] = {}

    def zone_for(self, user_id: int) -> tzinfo:
        return self.user_zones.get(user_id, self.default_zone)

    @commands.command(name="periode", aliases=["duree"])
    async def periode_command(self, ctx: commands.Context, *, texte: str):
        duration = parse_period(texte)
        if duration is None:
            await ctx.send(f"⚠️ Durée non reconnue : `{discord.utils.escape_markdown(texte)}`. Exemples : {EXEMPLES_PERIODE}.")
            return
        await ctx.send(f"⏱️ {format_duration(duration)}")

    @commands.command(name="date")
    async def date_command(self, ctx: commands.Context, *, texte: str):
        value = parse_date(texte, allow_omitted_year=True)
        if value is None:
            await ctx.send(f"⚠️ Date non reconnue : `{discord.utils.escape_markdown(texte)}`. Exemples : {EXEMPLES_DATE}.")
            return
        if year_omitted(value):
            await ctx.send(f"📅 --{value.month:02d}-{value.day:02d} (année non précisée)")
            return
        await ctx.send(f"📅 {format_date(value)}")

    @commands.command(name="quand")
    async def quand_command(self, ctx: commands.Context, *, texte: str):
        zone = self.zone_for(ctx.author.id)
        value = parse_datetime(texte, nudge_to_past=self.nudge_to_past, zone=zone, clock=self.clock)
        if value is None:
            await ctx.send(f"⚠️ Moment non reconnu : `{discord.utils.escape_markdown(texte)}`. Exemples : {EXEMPLES_QUAND}.")
            return
        ts = int(value.timestamp())
        await ctx.send(f"🕒 {format_zoned_datetime(value)} • <t:{ts}:F> • <t:{ts}:R>")

    @commands.command(name="fuseau", aliases=["tz"])
    async def fuseau_command(self, ctx: commands.Context, zone: Optional[str] = None):
        if zone is None:
            current = self.zone_for(ctx.author.id)
            await ctx.send(f"🌍 Ton fuseau : **{_zone_name(current)}**")
            return
        try:
            resolved = resolve_zone(zone)
        except ZoneNotFound:
            await ctx.send(f"⚠️ Fuseau inconnu : `{discord.utils.escape_markdown(zone)}`. Exemple : `Europe/Paris`.")
            return
        self.user_zones[ctx.author.id] = resolved
        log.info("Fuseau de %s réglé sur %s", ctx.author.id, _zone_name(resolved))
        await ctx.send(f"✅ Fuseau réglé sur **{_zone_name(resolved)}**")


async def setup(bot: commands.Bot):
    await bot.add_cog(ChronoCog(bot))
