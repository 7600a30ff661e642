"""
Entrypoint to run the chat assistant server.

From project root: uvicorn chat_assistant.main:app --reload
Or: python main.py
"""
if __name__ == "__main__":
    from chat_assistant.__main__ import main

    main()
