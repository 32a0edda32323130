"""
Fun-nections Server - Main Entry Point

This is the main entry point for the puzzle server.
It initializes the game service and starts the Flask-SocketIO application.
"""

import threading
import time
from funnections import create_app
from funnections.config import get_config, load_puzzle, get_puzzle_statistics
from funnections.services.game_service import initialize_game_service, get_game_service
from funnections.utils.game_logger import game_logger


def session_cleanup_worker(app, interval_seconds: int, max_idle_seconds: int):
    """
    Background worker that periodically drops idle game sessions.
    The shared default game is never removed.
    """
    while True:
        try:
            with app.app_context():
                game_service = get_game_service()
                if game_service:
                    cleanup_result = game_service.cleanup_idle_sessions(max_idle_seconds)
                    if cleanup_result["cleaned_count"] > 0:
                        game_logger.logger.info(
                            f"Session cleanup: Removed {cleanup_result['cleaned_count']} idle sessions"
                        )
                        for game_id in cleanup_result["removed_game_ids"]:
                            game_logger.log_game_event(
                                game_id, 'game_expired', 'system',
                                reason='idle', max_idle_seconds=max_idle_seconds
                            )
        except Exception as e:
            game_logger.logger.error(f"Error in session cleanup worker: {e}")

        time.sleep(interval_seconds)


def main():
    """Main function to initialize services and start the server."""
    try:
        config_class = get_config()
        print("Initializing services...")

        puzzle_groups = load_puzzle(config_class.PUZZLE_FILE)
        game_service = initialize_game_service(
            puzzle_groups=puzzle_groups,
            mistake_budget=config_class.MISTAKE_BUDGET,
            puzzle_date=config_class.PUZZLE_DATE
        )
        print("✓ Game service initialized successfully")
        print(f"  Puzzle: {get_puzzle_statistics(game_service.puzzle_groups)}")

        print("Creating Flask application...")
        app, socketio = create_app(config_class)
        print("✓ Flask application created successfully")

        cleanup_thread = threading.Thread(
            target=session_cleanup_worker,
            args=(app, config_class.CLEANUP_INTERVAL_SECONDS, config_class.SESSION_IDLE_SECONDS),
            daemon=True
        )
        cleanup_thread.start()
        print(f"✓ Session cleanup worker started - checking every {config_class.CLEANUP_INTERVAL_SECONDS} seconds")

        game_logger.logger.info("Fun-nections Server Starting")

        print(f"\nStarting Fun-nections Server on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Fun-nections Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
