from .send_sms import SendSmsUseCase, send_sms

__all__ = ["SendSmsUseCase", "send_sms"]
