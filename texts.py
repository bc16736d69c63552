from language import FALLBACK_CULTURE, ui_language

# Every user-visible string, keyed by message id then UI language.

ROOT_COMMAND_DESCRIPTION = {
    "en-US": "Friends Verifier: one-time passwords shared with your friends.",
    "zh-CN": "好友验证器：与好友共享的一次性密码。",
}

NAME_ARGUMENT = {
    "en-US": "name",
    "zh-CN": "名字",
}

NAME_ARGUMENT_DESCRIPTION = {
    "en-US": "Name of the friend.",
    "zh-CN": "好友的名字。",
}

PASSKEY_OPTION = {
    "en-US": "passkey",
    "zh-CN": "密钥",
}

PASSKEY_OPTION_DESCRIPTION = {
    "en-US": "Passkey agreed with the friend.",
    "zh-CN": "与好友约定的密钥。",
}

ADD_COMMAND_DESCRIPTION = {
    "en-US": "Add a friend, or update the passkey of an existing one.",
    "zh-CN": "添加好友，或更新已有好友的密钥。",
}

TYPE_OPTION = {
    "en-US": "type",
    "zh-CN": "类型",
}

TYPE_OPTION_DESCRIPTION = {
    "en-US": "What to output: url, code or qrcode.",
    "zh-CN": "输出内容：url、code 或 qrcode。",
}

OUTPUT_COMMAND_DESCRIPTION = {
    "en-US": "Output the current code, the provisioning URL or a QR code for a friend.",
    "zh-CN": "输出好友的当前验证码、配置链接或二维码。",
}

CODE_OPTION = {
    "en-US": "code",
    "zh-CN": "验证码",
}

CODE_OPTION_DESCRIPTION = {
    "en-US": "Code given by the friend.",
    "zh-CN": "好友提供的验证码。",
}

TIME_OPTION = {
    "en-US": "time",
    "zh-CN": "时间",
}

TIME_OPTION_DESCRIPTION = {
    "en-US": "Time the code was generated, as Unix seconds or an ISO 8601 date (default: now).",
    "zh-CN": "验证码的生成时间，Unix 秒数或 ISO 8601 日期（默认：现在）。",
}

INVALID_TIME_FORMAT = {
    "en-US": "Invalid time: '{value}'.",
    "zh-CN": "无效的时间：'{value}'。",
}

VERIFY_COMMAND_DESCRIPTION = {
    "en-US": "Verify a code given by a friend.",
    "zh-CN": "验证好友提供的验证码。",
}

REMOVE_COMMAND_DESCRIPTION = {
    "en-US": "Remove a friend.",
    "zh-CN": "删除好友。",
}

LANG_ARGUMENT = {
    "en-US": "code",
    "zh-CN": "语言代码",
}

LANG_ARGUMENT_DESCRIPTION = {
    "en-US": "Culture code such as zh-CN or en-US, or 'default' to follow the system.",
    "zh-CN": "语言代码，例如 zh-CN 或 en-US；'default' 表示跟随系统。",
}

LANG_COMMAND_DESCRIPTION = {
    "en-US": "Change the display language.",
    "zh-CN": "更改显示语言。",
}

LOG_COMMAND_DESCRIPTION = {
    "en-US": "Decrypt and display the audit log.",
    "zh-CN": "解密并显示审计日志。",
}

CONFIG_OPTION_DESCRIPTION = {
    "en-US": "Path of the configuration file.",
    "zh-CN": "配置文件路径。",
}

ADD_SUCCEED_FORMAT = {
    "en-US": "Added {name}. Provisioning URL: {uri}",
    "zh-CN": "已添加 {name}。配置链接：{uri}",
}

UPDATE_SUCCEED_FORMAT = {
    "en-US": "Updated {name}. Provisioning URL: {uri}",
    "zh-CN": "已更新 {name}。配置链接：{uri}",
}

FRIEND_NOT_FOUND_FORMAT = {
    "en-US": "Friend not found: {name}",
    "zh-CN": "未找到好友：{name}",
}

VERIFY_SUCCEED_FORMAT = {
    "en-US": "Verified: this is {name}.",
    "zh-CN": "验证成功：对方是 {name}。",
}

VERIFY_FAILED_FORMAT = {
    "en-US": "Verification failed: the code does not match.",
    "zh-CN": "验证失败：验证码不匹配。",
}

VERIFY_NOT_FOUND_FORMAT = {
    "en-US": "Verification failed: nobody with that name is in your list.",
    "zh-CN": "验证失败：列表中没有这个名字。",
}

REMOVE_SUCCEED_FORMAT = {
    "en-US": "Removed {name}.",
    "zh-CN": "已删除 {name}。",
}

CURRENT_LANGUAGE_CHANGED_FORMAT = {
    "en-US": "Current language changed to {language}.",
    "zh-CN": "当前语言已更改为{language}。",
}

NO_AUDIT_LOG = {
    "en-US": "No audit log found.",
    "zh-CN": "未找到审计日志。",
}


def t(message, culture, **kwargs):
    text = message.get(ui_language(culture)) or message[FALLBACK_CULTURE]
    return text.format(**kwargs) if kwargs else text
