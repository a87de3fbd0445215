from cs_tutor.main import run

run()
