from .multicloud_module import MultiCloudModule
