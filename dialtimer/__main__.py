from dialtimer.main import run

run()
