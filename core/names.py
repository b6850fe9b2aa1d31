"""
Well-known names shared by the renderer and the cluster services.
"""

# Name of the validating webhook configuration served by the admission controller
MULTUS_VALIDATING_WEBHOOK = "multus.openshift.io"

# Name given to the management cluster client in HyperShift deployments
MANAGEMENT_CLUSTER_NAME = "management"

# Namespace of the admission controller on standalone clusters
MULTUS_NAMESPACE = "openshift-multus"

# Label carrying the hosted cluster id on HyperShift resources
CLUSTER_ID_LABEL = "_id"

# Namespaces carrying this label are ignored by the admission controller
OPENSHIFT_NAMESPACE_SELECTOR = "openshift.io/cluster-monitoring==true"

SERVICE_CA_CONFIGMAP = "openshift-service-ca.crt"
SERVICE_CA_KEY = "service-ca.crt"

HOSTED_CONTROL_PLANE_GROUP = "hypershift.openshift.io"
HOSTED_CONTROL_PLANE_VERSION = "v1alpha1"
HOSTED_CONTROL_PLANE_PLURAL = "hostedcontrolplanes"

SECURITY_V1_GROUP_VERSION = "security.openshift.io/v1"
SECURITY_CONTEXT_CONSTRAINTS = "securitycontextconstraints"

MULTUS_ADMISSION_CONTROLLER_MANIFESTS = "network/multus-admission-controller"
