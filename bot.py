# Discord front end for showwork
# This file creates the Bot object, loads the cogs, and starts the event loop

import discord
from discord.ext import commands
from dotenv import load_dotenv
import logging

# env must be loaded before importing the local modules
load_dotenv()

# Local dependencies
from showwork.cogs import add_cogs
from showwork.global_vars import COMMAND_PREFIX, DISCORD_TOKEN, LOG_LEVEL

if DISCORD_TOKEN is None:
    exit("Environment file missing/corrupted. Halting now!")

logging.basicConfig(level=LOG_LEVEL)

activity = discord.Activity(type=discord.ActivityType.listening,
                            name=f"{COMMAND_PREFIX}calc")

intents = discord.Intents.default()
intents.message_content = True

bot = commands.Bot(command_prefix=COMMAND_PREFIX,
                   case_insensitive=True,
                   intents=intents,
                   activity=activity)


# Runs when bot has successfully logged in
# Note: This can and will be called multiple times during the bot's up-times
@bot.event
async def on_ready():
    # Only add cogs if no cogs are currently present on the bot
    # This prevents the recurring CommandRegistrationError exception
    if not bot.cogs:
        await add_cogs(bot)

    print(f"\n{bot.user} is connected to {len(bot.guilds)} guild(s)")

    await bot.tree.sync()

@bot.event
async def on_command_error(ctx, error):
    if hasattr(error, "handled") and error.handled:
        return

    print(f"\nCommand error triggered\n"
          f"\t Author: {ctx.author}\n"
          f"\t  Guild: {ctx.guild}\n"
          f"\tMessage: {ctx.message.content}\n"
          f"Error:\n{error}")


# Begin the bot's event loop
bot.run(DISCORD_TOKEN, log_handler=None)
