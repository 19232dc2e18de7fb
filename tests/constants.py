OWNER = "0x" + "a" * 40
UPDATER = "0x" + "b" * 40
ALICE = "0x" + "c" * 40
BOB = "0x" + "d" * 40
TOKEN_X = "0x" + "1" * 40
TOKEN_Y = "0x" + "2" * 40
