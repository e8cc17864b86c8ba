"""Click base class for the dconv command.

``DconvCommand`` takes an ``examples`` string and exposes it through an
eager ``--examples`` flag, so usage examples print even when the
required DATE argument is missing and ``--help`` stays short.

It also keeps hyphen-led arguments such as ``-3h``, ``-1v`` or
``-100000000`` positional: only tokens naming a declared option reach
Click's option parser, everything else goes after ``--``.
"""

from __future__ import annotations

from typing import Any

import click


class DconvCommand(click.Command):
    """Click Command with an optional ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        return super().parse_args(ctx, self.split_positionals(ctx, args))

    def split_positionals(self, ctx: click.Context, args: list[str]) -> list[str]:
        """Reorder *args* as ``[options..., "--", positionals...]``.

        A token is an option when it names a declared option exactly
        (``--name`` or ``--name=value``) or is a cluster of declared short
        flags (``-qv``). The value of a value-taking option is kept with
        it, even when it starts with ``-`` (``--utc-offset -05:00``).
        Positionals keep their relative order.
        """
        takes_value: dict[str, bool] = {}
        short_flags: set[str] = set()
        for param in self.get_params(ctx):
            if not isinstance(param, click.Option):
                continue
            is_flag = param.is_flag or param.count
            for name in (*param.opts, *param.secondary_opts):
                takes_value[name] = not is_flag
                if is_flag and len(name) == 2 and name[0] == "-" and name[1] != "-":
                    short_flags.add(name[1])

        options: list[str] = []
        positionals: list[str] = []
        remaining = iter(args)
        for arg in remaining:
            if arg == "--":
                positionals.extend(remaining)
                break
            name = arg.partition("=")[0] if arg.startswith("--") else arg
            if name in takes_value:
                options.append(arg)
                if takes_value[name] and "=" not in arg:
                    value = next(remaining, None)
                    if value is not None:
                        options.append(value)
            elif len(arg) > 1 and arg[0] == "-" and set(arg[1:]) <= short_flags:
                options.append(arg)
            else:
                positionals.append(arg)
        return [*options, "--", *positionals]
