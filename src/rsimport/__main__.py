"""CLI entry point: run `rsimport MODULE [SYMBOL ...]` or `python -m rsimport MODULE`."""

import logging
import os
import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    import argparse
    from .analysis.module_system import ModuleLoader, ImplKeyScheme
    from .shared.errors import RsImportError, SymbolNotFoundError
    from .utils.config import CLI_PROG_NAME, SEARCH_PATH_ENV_VAR

    parser = argparse.ArgumentParser(
        prog=CLI_PROG_NAME,
        description="Locate a Rust module and print its symbols, or the source of selected symbols.",
    )
    parser.add_argument("module", help="Module name (resolved as <search path>/<module>.rs)")
    parser.add_argument("symbols", nargs="*", help="Symbols to print (default: list all symbols)")
    parser.add_argument("-I", "--search-path", dest="search_paths", action="append", default=[],
                        metavar="DIR", help="Add a search directory (after '.', in order)")
    impl_keys = parser.add_mutually_exclusive_group()
    impl_keys.add_argument("--qualified-impl-keys", dest="impl_keys", action="store_const",
                           const=ImplKeyScheme.QUALIFIED, default=ImplKeyScheme.SIMPLE,
                           help="Key trait impls as impl_<Trait>_for_<Type>")
    impl_keys.add_argument("--token-stream-impl-keys", dest="impl_keys", action="store_const",
                           const=ImplKeyScheme.TOKEN_STREAM,
                           help="Space inherent impl keys like quote! output (impl_Wrapper < T >)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    search_paths = list(args.search_paths)
    env_paths = os.environ.get(SEARCH_PATH_ENV_VAR, "")
    search_paths.extend(p for p in env_paths.split(os.pathsep) if p)

    loader = ModuleLoader(search_paths=search_paths, impl_keys=args.impl_keys)

    try:
        module = loader.import_module(args.module)
    except RsImportError as e:
        sys.stderr.write(f"{CLI_PROG_NAME}: error: {e}\n")
        return 1

    if not args.symbols:
        sys.stdout.write(f"{module.path}\n")
        for name in sorted(module.symbols):
            sys.stdout.write(f"{module.symbols[name].kind.value}\t{name}\n")
        return 0

    sources = []
    for name in args.symbols:
        item = module.symbols.get(name)
        if item is None:
            sys.stderr.write(f"{CLI_PROG_NAME}: error: {SymbolNotFoundError(args.module, name)}\n")
            return 1
        sources.append(item.source)
    sys.stdout.write("\n\n".join(sources) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
