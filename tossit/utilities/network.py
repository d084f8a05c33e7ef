"""Network helper utilities.

Returns a usable local (LAN) IP address when available, so the startup
banner can point other devices on the same network at the server.
"""
import socket


def get_local_ip() -> str:
    """Return a non-loopback local IP address if possible, otherwise '127.0.0.1'.

    The UDP socket only asks the OS which interface would be selected to reach
    a public IP; no data is sent.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("8.8.8.8", 80))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip
