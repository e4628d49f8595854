"""User-facing response messages (zh-CN)."""

METHOD_NOT_ALLOWED = "Method Not Allowed"
INVALID_BODY = "无效的请求数据格式"
MISSING_FIELDS = "所有字段都是必填的"
INVALID_EMAIL = "请输入有效的邮箱地址"
MISSING_CREDENTIALS = "服务器配置错误：环境变量未设置"
INVALID_CONFIG = "服务器配置错误：配置项无效"
VERIFY_FAILED = "邮件服务器连接失败: {reason}"

SUBMIT_SUCCESS = "素材提交成功！我们将在3-7个工作日内审核并联系您。"

AUTH_FAILED = "邮件认证失败，请检查邮箱账号和授权码"
CONNECTION_FAILED = "无法连接到邮件服务器，请检查网络连接"
LOGIN_FAILED = "邮箱登录失败，请检查邮箱账号和授权码是否正确"
TIMED_OUT = "请求超时，请稍后重试"
SERVER_ERROR = "服务器错误，请稍后重试或直接发送邮件到 {contact}"
SERVER_ERROR_NO_CONTACT = "服务器错误，请稍后重试"


def server_error(contact=None) -> str:
    if contact:
        return SERVER_ERROR.format(contact=contact)
    return SERVER_ERROR_NO_CONTACT
