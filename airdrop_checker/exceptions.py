class AirdropCheckerError(Exception):
    pass


class ConfigurationError(AirdropCheckerError):
    pass


class InvalidAddressError(AirdropCheckerError):
    pass


class InvalidRequestError(AirdropCheckerError):
    pass


class RpcError(AirdropCheckerError):
    pass
