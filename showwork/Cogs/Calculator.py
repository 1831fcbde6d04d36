# Cog that evaluates mathematical expressions and shows each simplification step

from discord.ext.commands import Bot, Cog, errors, hybrid_command

from showwork.calculator import calculator
from showwork.errors import CalculatorError
from showwork.evaluator import FUNCTIONS
from showwork.parser import OPERATORS
from showwork.utils import package_message


class Calculator(Cog):

    # attr bot - our client
    def __init__(self, bot: Bot):
        self.bot = bot

    # $calc command used for showing the work behind a mathematical expression
    # param expression - all user input following the command name
    @hybrid_command(help="Evaluates a mathematical expression one step at a time.\n"
                         "Example: `$calc (1 + 2) * 3`\n"
                         f"Supported operators: `{'`, `'.join(OPERATORS)}` (`^^` is exponentiation), "
                         "and parenthesis `()`.\n"
                         f"Supported functions: `{'`, `'.join(FUNCTIONS)}`\n"
                         "Example: `$calc sqrt(9 + 7)`\n\n"
                         "**Note**: `sin` and `cos` take their input in radians and `log` is the natural logarithm.",
                    brief="Shows the work behind a mathematical expression")
    async def calc(self, ctx, *, expression: str):
        lines = []

        # The steps found before a failure are still sent, the error handler follows up
        try:
            calculator(expression, echo=lines.append)
        except CalculatorError:
            await package_message(lines, ctx)
            raise

        await package_message(lines, ctx)

    @calc.error
    async def calc_error(self, ctx, error):
        if isinstance(error, errors.CommandInvokeError):
            if isinstance(error.original, CalculatorError):
                await ctx.send(f"Unable to calculate result. {error.original}")
                error.handled = True
        elif isinstance(error, errors.MissingRequiredArgument):
            await ctx.send("You must include a mathematical expression with this command.\n"
                           "Please use `$help calc` for more information.")
            error.handled = True

    # $ping command used to test bot readiness and latency
    @hybrid_command(help="Returns \"pong\" and the round-trip latency if the bot is online.",
                    brief="Returns \"pong\" if the bot is online.")
    async def ping(self, ctx):
        await ctx.send(f"pong (*{self.bot.latency * 1000:.0f}ms*)")
