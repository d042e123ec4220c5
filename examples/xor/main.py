import logging

import numpy as np
import matplotlib.pyplot as plt

from bpnet import Network, NetworkConfig
from bpnet.core.logger import setup_logging
from bpnet.data import TrainingExample, make_dataset
from bpnet.trainer import Trainer
from bpnet.visualize import plot_error_history


setup_logging(filename='log.txt', stdout=True, level=logging.INFO)

random_state = np.random.RandomState(1234)


# Create a toy dataset ########################################################

inputs, targets = make_dataset(
    n_samples=2000, gate='xor', random_state=random_state)

examples = [
    TrainingExample(index=i, inputs=list(x), targets=list(y))
    for i, (x, y) in enumerate(zip(inputs, targets))
]

# Set up the network and train it #############################################

network = Network(
    [2, 4, 1],
    config=NetworkConfig(eta=0.15, alpha=0.5),
    random_state=random_state)

trainer = Trainer(network, progress_every=100)
report = trainer.train(examples)

for x in ([0, 0], [0, 1], [1, 0], [1, 1]):
    network.feed_forward(x)
    print(x, '=>', network.get_results())

plot_error_history(report.error_history)
plt.show()
