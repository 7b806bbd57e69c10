from .register_donor import RegisterDonorUseCase, RegistrationResult

__all__ = ["RegisterDonorUseCase", "RegistrationResult"]
