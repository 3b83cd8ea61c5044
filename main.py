from rich.pretty import pprint

from argset import *

__prog__ = "argset-demo"


if __name__ == '__main__':
    args = (
        ArgumentSet.from_argv()
        .set_about("Shows what argset parsed from the command line.")
        .set_version(__version__)
        .arg(Argument("file").set_short("f").set_long("file").expects_value().required())
        .arg(Argument("debug").set_short("d").set_long("debug"))
        .parse()
    )
    pprint({"file": args.get("file"), "debug": args.is_given("debug")})
