from person_api.main import run

run()
