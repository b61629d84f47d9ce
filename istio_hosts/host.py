import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from istio_hosts.config import default_identity_domain

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Host:
    """
    FQDN view of an Istio hostname.

    complete_input is True when service, namespace and cluster together
    decompose the original hostname. When False the hostname is treated
    as an external (ServiceEntry) host and only service is meaningful:
    it holds the original string.
    """

    service: str
    namespace: str = ""
    cluster: str = ""
    complete_input: bool = False

    def __str__(self) -> str:
        return f"{self.service}.{self.namespace}.{self.cluster}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "service": self.service,
            "namespace": self.namespace,
            "cluster": self.cluster,
            "completeInput": self.complete_input,
        }


def _resolve_cluster(cluster: str, identity_domain: str | None) -> str:
    if cluster:
        return cluster
    if identity_domain:
        return identity_domain
    return default_identity_domain()


def parse_host(
    hostname: str,
    namespace: str,
    cluster: str,
    identity_domain: str | None = None,
) -> Host:
    """
    Parse a hostname (short name or full FQDN) in the context of a namespace
    and cluster domain.

    - "reviews"                            -> reviews in the context namespace
    - "reviews.bookinfo.svc.cluster.local" -> decomposed when the suffix
                                              matches the cluster domain
    - anything else                        -> external host, kept verbatim
    """
    cluster = _resolve_cluster(cluster, identity_domain)

    parts = hostname.split(".")
    if len(parts) == 1:
        # Simple format
        return Host(
            service=hostname,
            namespace=namespace,
            cluster=cluster,
            complete_input=True,
        )

    if len(parts) > 2 and ".".join(parts[2:]) == cluster:
        # FQDN input
        return Host(
            service=parts[0],
            namespace=parts[1],
            cluster=cluster,
            complete_input=True,
        )

    # ServiceEntry or broken hostname
    logger.debug("Hostname %r does not match cluster %r, kept as-is", hostname, cluster)
    return Host(service=hostname)


def get_host(
    hostname: str,
    namespace: str,
    cluster: str,
    cluster_namespaces: Iterable[str] = (),
    identity_domain: str | None = None,
) -> Host:
    """
    Like parse_host, but uses the namespaces known in the cluster to decide
    whether a two-label hostname is "service.namespace" or an external host.
    """
    parts = hostname.split(".")
    if len(parts) == 2:
        # A namespace we know about wins over the ServiceEntry interpretation
        if parts[1] == namespace or parts[1] in set(cluster_namespaces):
            return Host(
                service=parts[0],
                namespace=parts[1],
                cluster=_resolve_cluster(cluster, identity_domain),
                complete_input=True,
            )

    return parse_host(hostname, namespace, cluster, identity_domain)
