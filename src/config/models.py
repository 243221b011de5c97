from pydantic import BaseModel, ConfigDict, Field


class AppSection(BaseModel):
    title: str = "Vena Pictures"


class AuthSection(BaseModel):
    reference_email: str = "admin@venapictures.com"
    reference_password: str = "password123"
    min_password_length: int = Field(default=8, ge=1)
    submit_delay_ms: int = Field(default=1000, ge=0)


class SessionSection(BaseModel):
    flag_key: str = "isAuthenticated"
    storage_path: str = ".vena/local_storage.json"


class NotificationSection(BaseModel):
    default_duration_ms: int = Field(default=3000, gt=0)


class FinanceSection(BaseModel):
    freelancer_payment_category: str = "Gaji Freelancer"
    default_payment_method: str = "Transfer Bank"


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    app: AppSection = Field(default_factory=AppSection)
    auth: AuthSection = Field(default_factory=AuthSection)
    session: SessionSection = Field(default_factory=SessionSection)
    notifications: NotificationSection = Field(default_factory=NotificationSection)
    finance: FinanceSection = Field(default_factory=FinanceSection)
