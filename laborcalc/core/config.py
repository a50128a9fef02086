from pydantic_settings import BaseSettings

from laborcalc.core.rules import LaborRules


class Settings(BaseSettings):
    # App
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    # Arbeitszeit-Schwellen
    STANDARD_DAILY_HOURS: float = 8
    WEEKLY_STANDARD_HOURS: float = 40
    WEEKLY_LIMIT_HOURS: float = 52

    # Nachtarbeit
    NIGHT_START: str = "22:00"
    NIGHT_END: str = "06:00"

    # Mindestlohn (KRW/h), jährlich aktualisieren
    MINIMUM_WAGE_HOURLY: int = 10030

    def labor_rules(self) -> LaborRules:
        return LaborRules(
            standard_daily_hours=self.STANDARD_DAILY_HOURS,
            weekly_standard_hours=self.WEEKLY_STANDARD_HOURS,
            weekly_limit_hours=self.WEEKLY_LIMIT_HOURS,
            night_start=self.NIGHT_START,
            night_end=self.NIGHT_END,
            minimum_wage_hourly=self.MINIMUM_WAGE_HOURLY,
        )

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
