from rich.pretty import pprint

from pennant import *

__styles__ = {"primary": "bold #22C55E"}


def main():
    arguments = Arguments({
        **Arguments.create_help(),
        "port, p": {
            "convertor": Arguments.number_convertor,
            "description": "Port to listen on.",
            "default": lambda: 8080,
        },
        "verbose, v": {
            "convertor": Arguments.boolean_convertor,
            "description": "Print every request.",
        },
    }, description="Serve the current directory.", colorful=True)

    if arguments.is_help_requested():
        arguments.trigger_help()

    pprint(arguments.get_flags())


if __name__ == '__main__':
    try:
        main()
    except Exception as error:
        trigger(error, colorful=True)
