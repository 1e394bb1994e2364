"""
Typed view of a resolved property set.
"""

from typing import Dict, Optional

from pydantic import BaseModel, Field


class PluginProperties(BaseModel):
    """
    The fixed keys of a resolved property set as typed fields.

    Keys that are not modelled here (extraProperties entries and any other key read
    from a property file) are kept as extras and are available through `extras()`.
    """

    plugin_node_name: str = Field(..., alias="pluginNodeName")
    plugin_name: str = Field(..., alias="pluginName")
    plugin_package_name: str = Field(..., alias="pluginPackageName")
    plugin_version: str = Field(..., alias="pluginVersion")
    plugin_archive: str = Field(..., alias="pluginArchive")
    result_activity_class_path: Optional[str] = Field(None, alias="resultActivityClassPath")
    notification_receiver_class_path: Optional[str] = Field(
        None, alias="notificationReceiverClassPath"
    )
    cancel_receiver_class_path: Optional[str] = Field(None, alias="cancelReceiverClassPath")

    # Godot
    godot_version: str = Field(..., alias="godotVersion")
    release_type: str = Field(..., alias="releaseType")
    godot_aar_url: str = Field(..., alias="godotAarUrl")
    godot_aar_file: str = Field(..., alias="godotAarFile")

    # Directories
    demo_add_ons_directory: str = Field(..., alias="demoAddOnsDirectory")
    demo_assets_directory: str = Field(..., alias="demoAssetsDirectory")
    template_directory: str = Field(..., alias="templateDirectory")
    assets_directory: str = Field(..., alias="assetsDirectory")

    # iOS
    ios_platform_version: Optional[str] = Field(None, alias="iosPlatformVersion")
    ios_frameworks: Optional[str] = Field(None, alias="iosFrameworks")
    ios_embedded_frameworks: Optional[str] = Field(None, alias="iosEmbeddedFrameworks")
    ios_linker_flags: Optional[str] = Field(None, alias="iosLinkerFlags")

    class Config:
        extra = "allow"
        populate_by_name = True
        frozen = True

    def extras(self) -> Dict[str, str]:
        return dict(self.model_extra or {})

    def to_dict(self) -> Dict[str, str]:
        """
        Convert back to the flat camelCase mapping, extras included.
        """
        return self.model_dump(by_alias=True, exclude_none=True)
