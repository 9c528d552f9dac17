from .app_definition import AppDefinition
from .deployment_id import AppDeploymentId
from .deployment_request import AppDeploymentRequest

__all__ = ["AppDefinition", "AppDeploymentId", "AppDeploymentRequest"]
