def make_payload(index=1, **overrides):
    payload = {
        'spotNumber': f'A{index:03d}',
        'licensePlate': f'ABC{index:04d}',
        'brand': 'Volkswagen',
        'model': 'Gol',
        'color': 'Silver',
        'responsibleName': 'Maria Souza',
        'apartment': str(100 + index),
        'block': 'A',
    }
    payload.update(overrides)
    return payload
