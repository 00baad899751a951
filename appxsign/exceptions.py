class AppxError(Exception):
    """Base class for all exceptions raised by appxsign"""
    pass


class AppxWarning(Warning):
    """Generic appxsign warning category"""
    pass


class PublisherNameWarning(AppxWarning):
    """Warning category for publisher names the certificate tool is likely to reject"""
    pass


class ConfigError(AppxError):
    """Error loading or applying configuration"""
    pass


class ToolError(AppxError):
    """An external SDK tool exited unsuccessfully"""
    def __init__(self, msg, returncode=None, output=''):
        self.returncode = returncode
        self.output = output
        AppxError.__init__(self, msg)


class ToolNotFoundError(ToolError):
    """An external SDK tool could not be found or started"""
    pass


class SigningError(AppxError):
    """Error preparing to sign a package"""
    pass


class AppxValidationError(AppxError):
    """Raised when validation fails"""
    pass


class InvalidSyntaxError(AppxValidationError):
    """Raised when syntax validation fails"""
    pass
