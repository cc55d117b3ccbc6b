"""Точка входа в приложение."""
from compressor.app import CompressorApp
from compressor.config import get_config
from compressor.logger import configure_logging, get_logger


def main() -> None:
    """Настраивает логирование, создаёт и запускает главное окно приложения."""
    config = get_config()
    configure_logging(config.log_level)
    get_logger(__name__).info("Запуск Image Compressor")
    app = CompressorApp(config)
    app.mainloop()


if __name__ == "__main__":
    main()
