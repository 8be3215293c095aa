#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import os
import logging
import discord
from discord.ext import commands
from dotenv import load_dotenv

from utils import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
log = logging.getLogger("main")

BASE_EXTENSIONS = [
    "chrono",
    "help",
]


class ChronoBot(commands.Bot):
    def __init__(self):
        load_dotenv()
        logging.getLogger().setLevel(settings.resolve_log_level())
        token = os.getenv("DISCORD_TOKEN")
        if not token:
            raise RuntimeError("DISCORD_TOKEN manquant")

        intents = discord.Intents.default()
        intents.message_content = True

        super().__init__(command_prefix=settings.resolve_command_prefix(), intents=intents)
        self.token = token

    async def _safe_load(self, ext_name: str) -> bool:
        try:
            await self.load_extension(ext_name)
            log.info("Extension chargée: %s", ext_name)
            return True
        except Exception as e:
            log.error("Échec de chargement de %s: %s", ext_name, e, exc_info=True)
            return False

    async def setup_hook(self):
        self.remove_command("help")

        for ext in BASE_EXTENSIONS:
            await self._safe_load(ext)

        cmds = [c.name for c in self.commands]
        log.info("Commandes enregistrées: %s", cmds)

    async def on_ready(self):
        log.info("Connecté comme %s (id:%s)", self.user, self.user.id)


bot = ChronoBot()


@bot.command(name="ping")
async def ping_cmd(ctx):
    await ctx.send("Pong!")


@bot.event
async def on_command_error(ctx, error):
    if isinstance(error, commands.MissingRequiredArgument):
        await ctx.reply(f"⚠️ Argument manquant : `{error.param.name}`. Tape `!aide`.", mention_author=False)
        return
    if isinstance(error, commands.CommandNotFound):
        return
    try:
        await ctx.reply(f"⚠️ {error.__class__.__name__}: {error}", mention_author=False)
    except discord.HTTPException:
        log.warning("Impossible de répondre à la commande en erreur")
    log.exception("on_command_error: %s", error, exc_info=error)


if __name__ == "__main__":
    bot.run(bot.token)
