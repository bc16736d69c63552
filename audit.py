import os
import datetime
from cryptography.fernet import Fernet, InvalidToken


class AuditError(Exception):
    """Raised when the audit key file holds something that is not a Fernet key."""


# =========================
# ENCRYPTED AUDIT LOG
# =========================

def get_fernet(key_file):
    if not os.path.exists(key_file):
        folder = os.path.dirname(key_file)
        if folder and not os.path.exists(folder):
            os.makedirs(folder)
        key = Fernet.generate_key()
        with open(key_file, 'wb') as f:
            f.write(key)
    else:
        with open(key_file, 'rb') as f:
            key = f.read()
    try:
        return Fernet(key)
    except ValueError as e:
        raise AuditError(f"Audit key file {key_file} is not a valid key: {e}") from e


def log_action(message, log_file, fernet):
    timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    full_message = f"[{timestamp}] {message}"
    encrypted = fernet.encrypt(full_message.encode())
    with open(log_file, 'ab') as f:
        f.write(encrypted + b"\n")


def read_log(log_file, fernet):
    """Yields decrypted log lines; lines that fail to decrypt come back as an error marker."""
    with open(log_file, 'rb') as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                yield fernet.decrypt(line).decode()
            except InvalidToken:
                yield "[Error] Unable to decrypt line."
