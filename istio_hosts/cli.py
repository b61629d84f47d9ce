import argparse
import logging
import sys
from typing import Any

import yaml

from istio_hosts import registry
from istio_hosts.config import MeshSettings, load_settings
from istio_hosts.host import get_host, parse_host
from istio_hosts.loader import load_objects
from istio_hosts.output import output_result
from istio_hosts.relations import build_host_relations

logger = logging.getLogger(__name__)


def _common_options() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (text, json, yaml)",
    )
    common.add_argument("--config", help="Path to a YAML settings file")
    common.add_argument("--verbose", action="store_true")
    return common


def build_parser() -> argparse.ArgumentParser:
    common = _common_options()
    parser = argparse.ArgumentParser(
        prog="istio-hosts",
        description="Resolve Istio hostnames and look up Istio config kinds",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    resolve = sub.add_parser(
        "resolve", parents=[common], help="Resolve a hostname into a Host"
    )
    resolve.add_argument("hostname")
    resolve.add_argument("--namespace", default="", help="Context namespace")
    resolve.add_argument("--cluster", default="", help="Cluster domain")
    resolve.add_argument(
        "--namespaces",
        nargs="*",
        default=None,
        help="Namespaces known in the cluster",
    )

    kind = sub.add_parser("kind", parents=[common], help="Kind for a plural name")
    kind.add_argument("plural")

    plural = sub.add_parser(
        "plural", parents=[common], help="Plural for an adapter/template kind"
    )
    plural.add_argument("kind")

    sub.add_parser("groups", parents=[common], help="List Istio group versions")

    relations = sub.add_parser(
        "relations", parents=[common], help="Group Istio objects by host"
    )
    relations.add_argument("path", help="File or folder with Istio objects")
    relations.add_argument("--cluster", default="", help="Cluster domain")
    relations.add_argument("--namespaces", nargs="*", default=[])

    return parser


def _resolve(args, settings: MeshSettings) -> dict[str, Any]:
    if args.namespaces is None:
        host = parse_host(
            args.hostname,
            args.namespace,
            args.cluster,
            identity_domain=settings.istio_identity_domain,
        )
    else:
        host = get_host(
            args.hostname,
            args.namespace,
            args.cluster,
            args.namespaces,
            identity_domain=settings.istio_identity_domain,
        )
    return {**host.to_dict(), "fqdn": str(host)}


def _groups() -> dict[str, Any]:
    result: dict[str, Any] = {}
    for domain, gv in registry.GROUP_VERSIONS.items():
        result[domain] = {
            "apiVersion": gv.api_version,
            "kinds": [e.object_kind for e in registry.kinds_for(domain)],
        }
    config = result["config"]
    for domain in ("adapters", "templates"):
        config["kinds"] += [e.object_kind for e in registry.kinds_for(domain)]
    return result


def _lookup_failed(message: str) -> int:
    print(f"[ERROR] {message}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        return _lookup_failed(f"Cannot load settings: {e}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    logger.debug("Identity domain: %s", settings.istio_identity_domain)

    result: Any
    if args.command == "resolve":
        result = _resolve(args, settings)

    elif args.command == "kind":
        kind = registry.kind_for_plural(args.plural)
        if kind is None:
            return _lookup_failed(f"Unknown plural '{args.plural}'")
        result = {"plural": args.plural, "kind": kind}

    elif args.command == "plural":
        plural = registry.plural_for_kind(args.kind)
        if plural is None:
            return _lookup_failed(f"No plural known for kind '{args.kind}'")
        result = {"kind": args.kind, "plural": plural}

    elif args.command == "groups":
        result = _groups()

    else:
        try:
            objects = load_objects(args.path)
        except (OSError, ValueError, yaml.YAMLError) as e:
            return _lookup_failed(f"Cannot load objects: {e}")
        result = build_host_relations(
            objects,
            cluster=args.cluster,
            cluster_namespaces=args.namespaces,
            identity_domain=settings.istio_identity_domain,
        )
        if not result:
            logger.warning("No hosts found in %s", args.path)

    output_result(result, args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main())
