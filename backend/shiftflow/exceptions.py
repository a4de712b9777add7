class ShiftFlowError(Exception):
    """Базовая ошибка предметной области; переводится в HTTP-ответ на границе запроса."""


class ValidationError(ShiftFlowError):
    """Отсутствующие или некорректные входные данные."""


class DuplicateScheduleError(ShiftFlowError):
    """График на этот период уже существует."""


class DuplicateWorkerError(ShiftFlowError):
    """Работник уже назначен в этот график."""


class DuplicateUsernameError(ShiftFlowError):
    """Логин уже занят."""


class DuplicateWorkerNameError(ShiftFlowError):
    """Работник с таким именем уже существует."""


class NotFoundError(ShiftFlowError):
    """Запрошенная сущность не найдена."""


class EmptyRosterError(ShiftFlowError):
    """Нет ни одного работника для построения графика."""


class StoreError(ShiftFlowError):
    """Сбой хранилища при чтении или записи."""


class AuthenticationError(ShiftFlowError):
    """Неверные учетные данные."""


# Соответствие ошибок HTTP-статусам
ERROR_STATUS_CODES = {
    ValidationError: 400,
    EmptyRosterError: 400,
    AuthenticationError: 401,
    NotFoundError: 404,
    DuplicateScheduleError: 409,
    DuplicateWorkerError: 409,
    DuplicateUsernameError: 409,
    DuplicateWorkerNameError: 409,
    StoreError: 500,
}


def status_code_for(error: ShiftFlowError) -> int:
    """HTTP-статус для ошибки (с учетом наследования)"""
    for error_type in type(error).__mro__:
        if error_type in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[error_type]
    return 500
