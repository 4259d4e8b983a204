from atqr.config.settings import Settings
from atqr.logging.logger import Log
from atqr.processor.processor import EXIT_ERROR, build_processor, determine_exit_code


def main() -> int:
    """Entry point: load settings -> configure logging -> run pipeline -> exit code."""
    try:
        settings = Settings()
    except Exception as exc:
        Log.configure("INFO")
        Log.error(f"Invalid configuration: {exc}")
        Log.shutdown()
        return EXIT_ERROR

    try:
        Log.configure(settings.log_level, settings.log_file)
        Log.info(f"AT QR Extractor started ({settings.app_env})")
        Log.info(f"Detections: {settings.detections_path}")
        context = build_processor(settings).process()
        Log.info("Processing completed successfully")
        return determine_exit_code(context.records, settings.fail_on_noncompliant)
    except Exception as exc:
        Log.error(f"Fatal error during processing: {exc}")
        return EXIT_ERROR
    finally:
        Log.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
