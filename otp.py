import io
import base64
import datetime
import pyotp
import qrcode
from pyotp import utils

# Config
ISSUER_NAME = "Friends Verifier"
CODE_DIGITS = 6
# Accept one 30s step either side of the given time
VALID_WINDOW = 1


def derive_key(name, passkey):
    """Raw HMAC key for a friend: the ASCII bytes of base64(utf8(name + passkey))."""
    return base64.b64encode(f"{name}{passkey}".encode("utf-8"))


def derive_secret(name, passkey):
    return base64.b32encode(derive_key(name, passkey)).decode("ascii").rstrip("=")


def get_totp(name, passkey):
    return pyotp.TOTP(derive_secret(name, passkey), digits=CODE_DIGITS)


def current_code(name, passkey, for_time=None):
    totp = get_totp(name, passkey)
    if for_time is None:
        return totp.now()
    return totp.at(for_time)


def normalize_code(code):
    code = str(code).strip()
    if code.isdigit() and len(code) < CODE_DIGITS:
        code = code.zfill(CODE_DIGITS)
    return code


def verify_code(name, passkey, code, for_time=None):
    totp = get_totp(name, passkey)
    if for_time is None:
        for_time = datetime.datetime.now()
    elif not isinstance(for_time, datetime.datetime):
        for_time = datetime.datetime.fromtimestamp(int(for_time))
    code = normalize_code(code)
    counter = totp.timecode(for_time)
    for offset in range(-VALID_WINDOW, VALID_WINDOW + 1):
        # No time step exists before the epoch
        if counter + offset < 0:
            continue
        if utils.strings_equal(code, totp.generate_otp(counter + offset)):
            return True
    return False


def provisioning_uri(name, passkey):
    return get_totp(name, passkey).provisioning_uri(name=name, issuer_name=ISSUER_NAME)


def qr_ascii(data):
    qr = qrcode.QRCode(error_correction=qrcode.constants.ERROR_CORRECT_Q, border=0)
    qr.add_data(data)
    qr.make(fit=True)
    out = io.StringIO()
    qr.print_ascii(out=out)
    return out.getvalue()
