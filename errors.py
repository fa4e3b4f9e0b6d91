# SPDX-FileCopyrightText: © 2023-2024 Devon D. Sparks 
# SPDX-License-Identifier: AGPL-3.0

class ResourceError(Exception):
    pass

class ValidationError(ResourceError, ValueError):
    pass

class BundleNotFoundError(ValidationError):
    pass

class RegistryError(ResourceError):
    pass

class MappingUnavailable(ResourceError):
    pass

class ResolutionFailure(ResourceError, ValueError):
    pass

class UnknownAttributeError(ResolutionFailure):
    pass

class StorageFailure(ResourceError):
    pass

class CreationError(ResourceError):
    pass
