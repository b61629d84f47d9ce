import logging
from collections.abc import Iterable

from istio_hosts.host import get_host
from istio_hosts.objects import IstioObject

logger = logging.getLogger(__name__)


def build_host_relations(
    objects: list[IstioObject],
    cluster: str = "",
    cluster_namespaces: Iterable[str] = (),
    identity_domain: str | None = None,
) -> dict[str, list[str]]:
    """
    Build a graph from logical hosts to the Istio objects referencing them.

    Complete hosts are keyed by their FQDN, external hosts by the raw
    hostname. Every namespace holding one of the objects counts as a
    namespace known in the cluster.

    Short names on cluster-scoped objects have no namespace to resolve
    against and are skipped.
    """
    namespaces = set(cluster_namespaces)
    namespaces.update(o.namespace for o in objects if o.namespace)

    relations: dict[str, set[str]] = {}
    for obj in objects:
        for hostname in obj.hosts():
            host = get_host(
                hostname,
                obj.namespace,
                cluster,
                namespaces,
                identity_domain=identity_domain,
            )
            if host.complete_input and not host.namespace:
                logger.debug(
                    "Skipping %r on %s: no namespace to resolve it in",
                    hostname,
                    obj.object_id,
                )
                continue
            key = str(host) if host.complete_input else host.service
            relations.setdefault(key, set()).add(obj.object_id)

    return {key: sorted(ids) for key, ids in sorted(relations.items())}
