"""Command line of the coevolution tool: option parsing and validation."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

from .parameters import SystemParameters, get_parameters

__all__ = ["ArgumentError", "CommandOptions", "help_text", "parse_arguments", "main"]

_PROG = "fugegga"


class ArgumentError(Exception):
    """Raised when the command line is not valid.

    ``show_usage`` asks for the usage line, ``show_help`` for the option list.
    """

    def __init__(self, message: str, *, show_usage: bool = False, show_help: bool = False):
        super().__init__(message)
        self.show_usage = show_usage
        self.show_help = show_help


@dataclass
class CommandOptions:
    """What the command line asked for."""

    dataset_file: str | None = None
    script_file: str | None = None
    fuzzy_file: str | None = None
    use_gui: bool = True
    run_from_cmd: bool = False
    verbose: bool = False
    evaluate: bool = False
    predict: bool = False
    show_help: bool = False


def help_text() -> str:
    """Return the list of valid options."""
    return (
        "\nValid parameters are :\n\n"
        " --verbose : Verbose output\n\n"
        " --evaluate : Perform an evaluation of the given fuzzy system on the specified database\n\n"
        " --predict : Perform a prediction of the given fuzzy system on the specified database\n\n"
        " -d  : Dataset  (required to run automatically from command line)\n"
        "       Value : Path to the dataset\n\n"
        " -s  : Script   (required to run automatically from command line)\n"
        "       Value : Path to the execution script\n\n"
        " -f  : Fuzzy system   (required for evalation/prediction)\n"
        "       Value : Path to the fuzzy system file\n\n"
        " -g  : GUI  (optionnal)\n"
        "       Value : yes (Show the GUI) \n"
        "               no  (Do not show the GUI) \n\n"
        " --help : this message\n"
    )


def _usage_text(prog: str) -> str:
    return (
        f"Usage : {prog} -p1 value -p2 value ...\n\n"
        "For parameter list run with --help\n"
    )


def _existing_file(path: str) -> str:
    if not os.path.exists(path):
        raise ArgumentError(f'file "{path}" not found !')
    return path


def parse_arguments(argv, params: SystemParameters | None = None) -> CommandOptions:
    """Parse the arguments that follow the program name.

    Options taking a value are recognised by their second character alone.
    A dataset given with ``-d`` is recorded in ``params``.
    """
    args = list(argv)
    if params is None:
        params = get_parameters()
    options = CommandOptions()

    if not args:
        return options
    if args[0] == "--help":
        options.show_help = True
        return options

    pos = 0
    while pos < len(args):
        arg = args[pos]
        if not arg.startswith("-"):
            raise ArgumentError("Invalid parameters format !", show_usage=True)
        if len(arg) < 2:
            raise ArgumentError("Invalid parameter !", show_help=True)

        kind = arg[1]
        if kind == "-":
            if arg == "--verbose":
                options.verbose = True
            elif arg == "--evaluate":
                options.evaluate = True
            elif arg == "--predict":
                options.predict = True
            else:
                raise ArgumentError("Invalid parameter !", show_help=True)
            pos += 1
            continue

        if kind not in "dsfg":
            raise ArgumentError("Invalid parameter !", show_help=True)
        if pos + 1 >= len(args):
            raise ArgumentError(f'missing value for "{arg}" !', show_usage=True)
        value = args[pos + 1]

        if kind == "d":
            options.dataset_file = _existing_file(value)
            params.dataset_name = value
        elif kind == "s":
            options.script_file = _existing_file(value)
        elif kind == "f":
            options.fuzzy_file = _existing_file(value)
        elif value == "yes":
            options.use_gui = True
        elif value == "no":
            options.use_gui = False
        else:
            raise ArgumentError(f'incorrect value "{value}" !')
        pos += 2

    if options.evaluate or options.predict:
        if options.evaluate and options.predict:
            raise ArgumentError("you cannot perform both a prediction and a evaluation !")
        if options.fuzzy_file is None:
            raise ArgumentError(
                "you must specify a fuzzy system to perform a evaluation/prediction !"
            )
        if options.dataset_file is None:
            raise ArgumentError(
                "you must specify a dataset to perform a evaluation/prediction !"
            )
    elif options.dataset_file is None or options.script_file is None:
        raise ArgumentError(
            "you must load a dataset AND a script to run automatically from command line !"
        )

    options.run_from_cmd = True
    return options


def main(argv=None) -> int:
    """Parse the command line and report the outcome; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_arguments(argv)
    except ArgumentError as error:
        print(f"\nERROR : {error}\n")
        if error.show_usage:
            print(_usage_text(_PROG))
        if error.show_help:
            print(help_text())
        return 1
    if options.show_help:
        print(help_text())
    return 0


if __name__ == "__main__":
    sys.exit(main())