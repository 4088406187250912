"""
System router exposing the singleton managers behind the application.
"""

from fastapi import APIRouter, Depends
from creational.core.dependencies import (
    get_config_manager,
    get_connection_manager,
    get_service_manager,
    get_settings
)
from creational.core.config_manager import ConfigManager
from creational.core.connection_manager import ConnectionManager
from creational.core.service_manager import ServiceManager

router = APIRouter(
    prefix="/system",
    tags=["System Management"],
    responses={404: {"description": "Not found"}},
)


@router.get("/status")
def get_system_status(
    service_mgr: ServiceManager = Depends(get_service_manager),
    config_mgr: ConfigManager = Depends(get_config_manager)
):
    """
    Get comprehensive system status using singleton managers.
    """
    return {
        "application_status": service_mgr.get_application_status(),
        "config_info": {
            "debug_mode": config_mgr.is_debug_mode(),
            "database_url_configured": bool(config_mgr.get_database_url()),
            **config_mgr.get_catalog_settings()
        },
        "available_services": service_mgr.list_services()
    }


@router.get("/database/info")
def get_database_info(
    connection_mgr: ConnectionManager = Depends(get_connection_manager)
):
    """
    Get connection information from the connection holder singleton.
    """
    return {
        "connection_info": connection_mgr.get_connection_info(),
        "connection_healthy": connection_mgr.check_connection()
    }


@router.get("/config/settings")
def get_config_settings(
    settings = Depends(get_settings)
):
    """
    Get application configuration settings (safe subset).
    """
    return {
        "app_name": settings.app_name,
        "docs_title": settings.docs_title,
        "debug": settings.debug,
        "log_level": settings.log_level,
        "seed_prototypes": settings.seed_prototypes
    }


@router.post("/config/reload")
def reload_configuration(
    config_mgr: ConfigManager = Depends(get_config_manager)
):
    """
    Reload application configuration without restarting the application.
    """
    try:
        config_mgr.reload_settings()
        return {
            "success": True,
            "message": "Configuration reloaded successfully",
            "debug_mode": config_mgr.is_debug_mode()
        }
    except Exception as e:
        return {
            "success": False,
            "message": f"Failed to reload configuration: {str(e)}"
        }
