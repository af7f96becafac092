class AdbCtlError(Exception):
    pass


class NoDevicesError(AdbCtlError):
    pass


class ConnectivityError(AdbCtlError):
    pass
