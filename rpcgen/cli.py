"""
Command line driver

Loads a Python module, describes the requested service classes and writes
the generated stub files.

Usage:
    rpcgen services.py Inspector --output-dir generated/
    rpcgen my_package.services Inspector Highlighter -o generated/ --lf
"""

import argparse
import importlib
import importlib.util
import logging
import sys
import time
from pathlib import Path

from .code_writer import CRLF, LF
from .exceptions import RpcGenException, ModuleLoadError, ServiceNotFoundError
from .generator import get_generator
from .options import GeneratorOptions
from .reflection import TypeDescriber, describe_service

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate RPC interface stubs from Python service classes")
    parser.add_argument("source", help="Path to a .py file or dotted module name")
    parser.add_argument("symbols", nargs="+", help="Service class names within the module")
    parser.add_argument("--output-dir", "-o", default="generated", help="Output directory")
    parser.add_argument("--generator", "-g", default="typescript", help="Generator name or module:Class path")
    parser.add_argument("--suffix", default="rpc", help="Suffix appended to the service name")
    parser.add_argument("--extension", default="ts", help="Output file extension")
    parser.add_argument("--indent", type=int, default=4, help="Spaces per indentation level")
    parser.add_argument("--lf", action="store_true", help="Use LF instead of CRLF line endings")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def load_module(source: str):
    """Import a module from a file path or a dotted name"""
    path = Path(source)
    if path.suffix != '.py':
        try:
            return importlib.import_module(source)
        except ImportError as e:
            raise ModuleLoadError(f"Cannot import module {source}: {e}", {"module": source}) from e

    if not path.exists():
        raise ModuleLoadError(f"Cannot find file: {source}", {"path": source})

    # Loaded under a private name, never replacing an importable module
    spec = importlib.util.spec_from_file_location(f"_rpcgen_src_{path.stem}", path)
    module = importlib.util.module_from_spec(spec)
    # Annotation lookup resolves names through sys.modules
    sys.modules[spec.name] = module
    try:
        spec.loader.exec_module(module)
    except Exception as e:
        del sys.modules[spec.name]
        raise ModuleLoadError(f"Failed to load {source}: {e}", {"path": source, "error": str(e)}) from e
    return module


def resolve_service(module, symbol: str) -> type:
    """Find a class by (possibly dotted) name within module"""
    target = module
    for part in symbol.split('.'):
        target = getattr(target, part, None)
        if target is None:
            break
    if not isinstance(target, type):
        raise ServiceNotFoundError(symbol, module.__name__)
    return target


def main(argv=None) -> int:
    start_time = time.perf_counter()

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = GeneratorOptions(
        indent_width=args.indent,
        newline=LF if args.lf else CRLF,
        file_suffix=args.suffix,
        extension=args.extension,
    )

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    try:
        generator = get_generator(args.generator, options)
        module = load_module(args.source)
        describer = TypeDescriber()
        for symbol in args.symbols:
            service = describe_service(resolve_service(module, symbol), describer)
            for filename, content in generator.generate(service):
                path = output_dir / filename
                path.write_text(content, encoding="utf-8", newline="")
                print(f"Generated: {path}")
    except RpcGenException as e:
        logger.debug("Generation failed: %s", e.to_dict())
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    elapsed = time.perf_counter() - start_time
    print(f"Generation completed in {elapsed*1000:.2f} ms")
    return 0


if __name__ == "__main__":
    sys.exit(main())
